# This project was developed with assistance from AI tools.
"""
Domain enums for lender rate sheets and borrower quote requests.

Shared domain types used by both SQLAlchemy models (ratedb package)
and Pydantic schemas (ratecompare package).
"""

import enum


class LoanType(str, enum.Enum):
    CONVENTIONAL = "conventional"
    FHA = "fha"
    VA = "va"
    USDA = "usda"
    JUMBO = "jumbo"


class LoanTerm(str, enum.Enum):
    """Fixed-rate loan term in years."""

    YEARS_15 = "15"
    YEARS_20 = "20"
    YEARS_25 = "25"
    YEARS_30 = "30"

    @property
    def years(self) -> int:
        return int(self.value)

    @property
    def months(self) -> int:
        return self.years * 12


class PropertyType(str, enum.Enum):
    SINGLE_FAMILY = "single_family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi_family"


class OccupancyType(str, enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    INVESTMENT = "investment"
