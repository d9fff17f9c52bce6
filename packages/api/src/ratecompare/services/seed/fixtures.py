# This project was developed with assistance from AI tools.
"""Demo lenders and rate sheets.

Simulated for demonstration purposes -- not real lenders or market rates.
Rates reference their lender by ``lender_ref`` (the lender name).
"""

import hashlib
import json
from decimal import Decimal

from ratedb.enums import LoanTerm, LoanType

LENDERS: list[dict] = [
    {
        "name": "Harborline Mortgage",
        "logo_url": "https://example.com/logos/harborline.png",
        "website_url": "https://harborline.example.com",
        "phone": "555-0101",
        "email": "rates@harborline.example.com",
    },
    {
        "name": "Summit Ridge Bank",
        "logo_url": "https://example.com/logos/summit-ridge.png",
        "website_url": "https://summitridge.example.com",
        "phone": "555-0102",
        "email": "loans@summitridge.example.com",
    },
    {
        "name": "Prairie Federal Credit Union",
        "logo_url": None,
        "website_url": "https://prairiefcu.example.com",
        "phone": "555-0103",
        "email": None,
    },
    {
        "name": "Keystone Home Lending",
        "logo_url": "https://example.com/logos/keystone.png",
        "website_url": "https://keystone.example.com",
        "phone": None,
        "email": "hello@keystone.example.com",
    },
]


def _rate(lender_ref, loan_type, loan_term, rate, apr, points, min_score, max_amount, min_down, closing):
    return {
        "lender_ref": lender_ref,
        "loan_type": loan_type,
        "loan_term": loan_term,
        "interest_rate": Decimal(rate),
        "apr": Decimal(apr),
        "points": Decimal(points),
        "min_credit_score": min_score,
        "max_loan_amount": Decimal(max_amount),
        "min_down_payment_percent": Decimal(min_down),
        "closing_costs": Decimal(closing) if closing is not None else None,
    }


RATES: list[dict] = [
    # Conventional
    _rate("Harborline Mortgage", LoanType.CONVENTIONAL, LoanTerm.YEARS_30,
          "6.625", "6.781", "0.50", 680, "766550.00", "5.00", "4850.00"),
    _rate("Harborline Mortgage", LoanType.CONVENTIONAL, LoanTerm.YEARS_15,
          "5.875", "6.102", "0.75", 680, "766550.00", "5.00", "4850.00"),
    _rate("Summit Ridge Bank", LoanType.CONVENTIONAL, LoanTerm.YEARS_30,
          "6.500", "6.712", "1.00", 720, "766550.00", "10.00", "5200.00"),
    _rate("Summit Ridge Bank", LoanType.CONVENTIONAL, LoanTerm.YEARS_20,
          "6.250", "6.448", "0.50", 700, "766550.00", "10.00", "5200.00"),
    _rate("Keystone Home Lending", LoanType.CONVENTIONAL, LoanTerm.YEARS_30,
          "6.750", "6.820", "0.00", 640, "766550.00", "3.00", None),
    _rate("Keystone Home Lending", LoanType.CONVENTIONAL, LoanTerm.YEARS_25,
          "6.500", "6.611", "0.25", 660, "766550.00", "5.00", None),
    # Government-backed
    _rate("Harborline Mortgage", LoanType.FHA, LoanTerm.YEARS_30,
          "6.125", "7.014", "0.00", 580, "498257.00", "3.50", "6100.00"),
    _rate("Prairie Federal Credit Union", LoanType.FHA, LoanTerm.YEARS_30,
          "6.250", "7.101", "0.25", 600, "498257.00", "3.50", "3900.00"),
    _rate("Prairie Federal Credit Union", LoanType.VA, LoanTerm.YEARS_30,
          "5.990", "6.174", "0.00", 620, "766550.00", "0.00", "3400.00"),
    _rate("Summit Ridge Bank", LoanType.VA, LoanTerm.YEARS_15,
          "5.500", "5.731", "0.50", 640, "766550.00", "0.00", "4100.00"),
    _rate("Prairie Federal Credit Union", LoanType.USDA, LoanTerm.YEARS_30,
          "6.125", "6.502", "0.00", 640, "377600.00", "0.00", "3600.00"),
    # Jumbo
    _rate("Summit Ridge Bank", LoanType.JUMBO, LoanTerm.YEARS_30,
          "6.875", "6.990", "0.75", 740, "3000000.00", "20.00", "9800.00"),
    _rate("Keystone Home Lending", LoanType.JUMBO, LoanTerm.YEARS_30,
          "7.000", "7.085", "0.50", 720, "2000000.00", "15.00", None),
]


def compute_config_hash() -> str:
    """Compute a SHA-256 hash of the fixture data for idempotency checks."""
    content = json.dumps(
        {
            "lenders": [lender["name"] for lender in LENDERS],
            "rates": [
                [r["lender_ref"], r["loan_type"].value, r["loan_term"].value, str(r["interest_rate"])]
                for r in RATES
            ],
        },
        sort_keys=True,
    )
    return hashlib.sha256(content.encode()).hexdigest()
