# This project was developed with assistance from AI tools.
"""Functional tests: borrower journeys against the demo rate sheets.

Profiles go through the public quote endpoint; the catalog is the seeded
demo data held in memory.
"""

import pytest

from ratecompare.core.config import settings

from ..factories import profile_payload

pytestmark = pytest.mark.functional


@pytest.fixture(autouse=True)
def _no_recording(monkeypatch):
    monkeypatch.setattr(settings, "RECORD_QUOTE_REQUESTS", False)


def _quote(client, **overrides):
    response = client.post("/api/public/quotes", json=profile_payload(**overrides))
    assert response.status_code == 200
    return response.json()


class TestConventionalBorrower:
    """Conventional 30-year applicants with varying credit and down payment."""

    def test_prime_borrower_sees_all_three_lenders(self, client):
        quotes = _quote(client)
        assert [q["lender_name"] for q in quotes] == [
            "Summit Ridge Bank",
            "Harborline Mortgage",
            "Keystone Home Lending",
        ]
        aprs = [q["apr"] for q in quotes]
        assert aprs == sorted(aprs)

    def test_lower_credit_drops_stricter_lender(self, client):
        quotes = _quote(client, credit_score=700)
        assert "Summit Ridge Bank" not in {q["lender_name"] for q in quotes}
        assert len(quotes) == 2

    def test_small_down_payment(self, client):
        # 4% down: only the 3% minimum product qualifies
        quotes = _quote(client, loan_amount=480000, property_value=500000, down_payment=20000)
        assert [q["lender_name"] for q in quotes] == ["Keystone Home Lending"]
        assert quotes[0]["loan_to_value_ratio"] == 96.0

    def test_fifteen_year_term_only_matches_fifteen_year_products(self, client):
        quotes = _quote(client, loan_term="15")
        assert [q["loan_term"] for q in quotes] == ["15"]
        assert quotes[0]["lender_name"] == "Harborline Mortgage"


class TestSpecialtyLoans:
    """Jumbo and USDA products with their own limits."""

    def test_jumbo_requires_higher_credit_at_summit(self, client):
        body = {
            "loan_amount": 1200000,
            "property_value": 1500000,
            "down_payment": 300000,
            "loan_type": "jumbo",
        }
        assert [q["lender_name"] for q in _quote(client, credit_score=730, **body)] == [
            "Keystone Home Lending"
        ]
        assert [q["lender_name"] for q in _quote(client, credit_score=750, **body)] == [
            "Summit Ridge Bank",
            "Keystone Home Lending",
        ]

    def test_usda_loan_over_limit_has_no_quotes(self, client):
        assert _quote(client, loan_type="usda", loan_amount=400000) == []


class TestLenderStatus:
    def test_deactivated_lender_disappears(self, client, catalog):
        catalog.lenders = [
            lender.model_copy(update={"is_active": False})
            if lender.name == "Harborline Mortgage"
            else lender
            for lender in catalog.lenders
        ]
        names = {q["lender_name"] for q in _quote(client)}
        assert "Harborline Mortgage" not in names
        assert len(names) == 2
