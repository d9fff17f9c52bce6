# This project was developed with assistance from AI tools.
"""SqlRateCatalog and admin services against real PostgreSQL."""

from decimal import Decimal

import pytest

from ratecompare.services.catalog import SqlRateCatalog
from ratecompare.services.quotes import compute_quotes
from ratecompare.services.rates import list_rates

from ..factories import make_profile

pytestmark = pytest.mark.integration


async def test_active_lenders_only(db_session, catalog_rows):
    lenders = await SqlRateCatalog(db_session).list_active_lenders()
    names = {lender.name for lender in lenders}
    assert {"Harbor Bank", "Summit Bank"} <= names
    assert "Dormant Bank" not in names


async def test_active_rates_of_active_lenders(db_session, catalog_rows):
    rates = await SqlRateCatalog(db_session).list_active_rates()
    ids = {rate.id for rate in rates}
    assert catalog_rows["harbor_30"].id in ids
    assert catalog_rows["summit_30"].id in ids
    assert catalog_rows["summit_inactive"].id not in ids
    assert catalog_rows["dormant_30"].id not in ids


async def test_list_rates_matches_catalog(db_session, catalog_rows):
    admin_ids = [rate.id for rate in await list_rates(db_session)]
    catalog_ids = [rate.id for rate in await SqlRateCatalog(db_session).list_active_rates()]
    assert admin_ids == catalog_ids


async def test_compute_quotes_end_to_end(db_session, catalog_rows):
    quotes = await compute_quotes(SqlRateCatalog(db_session), make_profile())
    ours = [
        q for q in quotes
        if q.rate_id in {catalog_rows["harbor_30"].id, catalog_rows["summit_30"].id}
    ]
    assert [q.lender_name for q in ours] == ["Summit Bank", "Harbor Bank"]
    harbor = ours[1]
    assert harbor.monthly_payment == Decimal("2398.20")
    assert harbor.closing_costs == Decimal("4200.00")
    assert harbor.lender_logo_url == "https://example.com/harbor.png"
