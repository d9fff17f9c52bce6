# This project was developed with assistance from AI tools.
"""Read-only catalog records handed to the quote engine.

Decoupled from the ORM so any catalog source (database, fixture, cache)
can feed the engine the same shapes.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from ratedb.enums import LoanTerm, LoanType


class LenderRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    logo_url: str | None = None
    is_active: bool = True


class RateRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    lender_id: int
    loan_type: LoanType
    loan_term: LoanTerm
    interest_rate: Decimal
    apr: Decimal
    points: Decimal = Decimal("0")
    min_credit_score: int
    max_loan_amount: Decimal
    min_down_payment_percent: Decimal
    closing_costs: Decimal | None = None
    is_active: bool = True
