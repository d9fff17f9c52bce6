# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .enums import LoanTerm, LoanType, OccupancyType, PropertyType
from .models import DemoDataManifest, Lender, MortgageQuoteRequest, MortgageRate

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Enums
    "LoanType",
    "LoanTerm",
    "PropertyType",
    "OccupancyType",
    # Models
    "Lender",
    "MortgageRate",
    "MortgageQuoteRequest",
    "DemoDataManifest",
]
