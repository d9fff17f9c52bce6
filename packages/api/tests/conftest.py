# This project was developed with assistance from AI tools.
"""Shared fixtures: the real app with a mock DB session and an in-memory catalog.

``client`` never touches PostgreSQL. Tests that need rate data put records
on the ``catalog`` fixture; tests that exercise admin routes configure the
``mock_session`` results directly.
"""

import pytest
from fastapi.testclient import TestClient
from ratedb import get_db

from ratecompare.main import app
from ratecompare.services.catalog import get_rate_catalog

from .factories import InMemoryCatalog
from .functional.mock_db import make_mock_session


@pytest.fixture
def mock_session():
    return make_mock_session()


@pytest.fixture
def catalog():
    return InMemoryCatalog()


@pytest.fixture
def client(mock_session, catalog):
    """TestClient whose DB session and rate catalog are replaced."""

    async def fake_db():
        yield mock_session

    async def fake_catalog():
        return catalog

    app.dependency_overrides[get_db] = fake_db
    app.dependency_overrides[get_rate_catalog] = fake_catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
