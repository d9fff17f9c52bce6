# This project was developed with assistance from AI tools.
"""Tests for the health endpoint."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from ratedb import get_db_service

from ratecompare.main import app


@pytest.fixture
def db_service():
    service = MagicMock()
    service.health_check = AsyncMock(return_value=True)
    return service


@pytest.fixture
def health_client(client, db_service):
    async def fake_db_service():
        return db_service

    app.dependency_overrides[get_db_service] = fake_db_service
    return client


def test_health_all_healthy(health_client):
    response = health_client.get("/health/")
    assert response.status_code == 200
    components = {c["name"]: c for c in response.json()}
    assert components["API"]["status"] == "healthy"
    assert components["API"]["version"] == "0.1.0"
    assert components["Database"]["status"] == "healthy"


def test_health_reports_database_down(health_client, db_service):
    db_service.health_check.return_value = False
    response = health_client.get("/health/")
    assert response.status_code == 200
    components = {c["name"]: c for c in response.json()}
    assert components["Database"]["status"] == "unhealthy"
