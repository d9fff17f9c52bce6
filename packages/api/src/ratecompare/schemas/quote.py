# This project was developed with assistance from AI tools.
"""Borrower quote request and computed quote schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from ratedb.enums import LoanTerm, LoanType, OccupancyType, PropertyType

from . import Pagination
from ._types import Numeric


class QuoteRequestCreate(BaseModel):
    """Borrower profile submitted from the quote form."""

    loan_amount: Decimal = Field(gt=0, decimal_places=2)
    property_value: Decimal = Field(gt=0, decimal_places=2)
    down_payment: Decimal = Field(gt=0, decimal_places=2)
    credit_score: int = Field(ge=300, le=850)
    loan_type: LoanType
    loan_term: LoanTerm
    property_type: PropertyType
    occupancy_type: OccupancyType
    zip_code: str = Field(pattern=r"^\d{5}(-\d{4})?$")
    debt_to_income_ratio: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)


class MortgageQuote(BaseModel):
    """One lender offer priced for the submitted profile. Never persisted."""

    rate_id: int
    lender_id: int
    lender_name: str
    lender_logo_url: str | None = None
    loan_type: LoanType
    loan_term: LoanTerm
    interest_rate: Numeric
    apr: Numeric
    points: Numeric
    monthly_payment: Numeric
    total_interest: Numeric
    closing_costs: Numeric | None = None
    down_payment_percent: Numeric
    loan_to_value_ratio: Numeric


class QuoteRequestResponse(BaseModel):
    """A stored borrower submission."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    loan_amount: Numeric
    property_value: Numeric
    down_payment: Numeric
    credit_score: int
    loan_type: LoanType
    loan_term: LoanTerm
    property_type: PropertyType
    occupancy_type: OccupancyType
    zip_code: str
    debt_to_income_ratio: Numeric | None = None
    created_at: datetime


class QuoteRequestListResponse(BaseModel):
    """Paginated list of stored borrower submissions."""

    data: list[QuoteRequestResponse]
    pagination: Pagination
