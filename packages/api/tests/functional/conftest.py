# This project was developed with assistance from AI tools.
"""Fixtures for functional tests.

Functional tests drive the real app end to end against the demo rate
sheets. The ``catalog`` fixture is overridden here so the shared ``client``
quotes from the seeded lenders instead of an empty catalog.
"""

import pytest

from ratecompare.schemas.catalog import LenderRecord, RateRecord
from ratecompare.services.seed.fixtures import LENDERS, RATES

from ..factories import InMemoryCatalog


def build_demo_catalog() -> InMemoryCatalog:
    """Demo lenders and rates with sequential ids, as a fresh seed would assign."""
    lenders = [
        LenderRecord(id=i, name=data["name"], logo_url=data["logo_url"])
        for i, data in enumerate(LENDERS, start=1)
    ]
    ids_by_name = {lender.name: lender.id for lender in lenders}
    rates = [
        RateRecord(
            id=i,
            lender_id=ids_by_name[data["lender_ref"]],
            **{k: v for k, v in data.items() if k != "lender_ref"},
        )
        for i, data in enumerate(RATES, start=1)
    ]
    return InMemoryCatalog(lenders=lenders, rates=rates)


@pytest.fixture
def catalog():
    return build_demo_catalog()
