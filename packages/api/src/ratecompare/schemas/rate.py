# This project was developed with assistance from AI tools.
"""Rate sheet request/response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from ratedb.enums import LoanTerm, LoanType

from ._types import Numeric


class MortgageRateCreate(BaseModel):
    """Publish a rate for one lender product."""

    lender_id: int
    loan_type: LoanType
    loan_term: LoanTerm
    interest_rate: Decimal = Field(ge=0, le=Decimal("99.999"), decimal_places=3)
    apr: Decimal = Field(ge=0, le=Decimal("99.999"), decimal_places=3)
    points: Decimal = Field(default=Decimal("0"), ge=0, le=Decimal("999.99"), decimal_places=2)
    min_credit_score: int = Field(ge=300, le=850)
    max_loan_amount: Decimal = Field(gt=0, decimal_places=2)
    min_down_payment_percent: Decimal = Field(ge=0, le=100, decimal_places=2)
    closing_costs: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    is_active: bool = True


class MortgageRateUpdate(BaseModel):
    """Partial rate update.

    Send ``closing_costs: null`` to clear a previously published amount;
    omit the key to leave it unchanged.
    """

    lender_id: int | None = None
    loan_type: LoanType | None = None
    loan_term: LoanTerm | None = None
    interest_rate: Decimal | None = Field(default=None, ge=0, le=Decimal("99.999"), decimal_places=3)
    apr: Decimal | None = Field(default=None, ge=0, le=Decimal("99.999"), decimal_places=3)
    points: Decimal | None = Field(default=None, ge=0, le=Decimal("999.99"), decimal_places=2)
    min_credit_score: int | None = Field(default=None, ge=300, le=850)
    max_loan_amount: Decimal | None = Field(default=None, gt=0, decimal_places=2)
    min_down_payment_percent: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)
    closing_costs: Decimal | None = Field(default=None, ge=0, decimal_places=2)
    is_active: bool | None = None


class MortgageRateResponse(BaseModel):
    """Single rate sheet entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    lender_id: int
    loan_type: LoanType
    loan_term: LoanTerm
    interest_rate: Numeric
    apr: Numeric
    points: Numeric
    min_credit_score: int
    max_loan_amount: Numeric
    min_down_payment_percent: Numeric
    closing_costs: Numeric | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
