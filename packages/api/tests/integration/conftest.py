# This project was developed with assistance from AI tools.
"""Integration test fixtures -- real PostgreSQL, no mocks.

A session-scoped container provides a real PostgreSQL instance migrated to
head. Function-scoped fixtures give each test an isolated DB session with
savepoint rollback so tests don't leak state.
"""

import os

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

# ---------------------------------------------------------------------------
# Mark all tests in this directory as integration
# ---------------------------------------------------------------------------
pytestmark = pytest.mark.integration


# ---------------------------------------------------------------------------
# Session-scoped: container + engine + migrations
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def pg_container():
    """Start postgres:16 via testcontainers."""
    with PostgresContainer(
        image="postgres:16",
        username="test",
        password="test",
        dbname="test",
    ) as pg:
        yield pg


@pytest.fixture(scope="session")
def db_url(pg_container):
    """Async DB URL for asyncpg."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql+asyncpg://test:test@{host}:{port}/test"


@pytest.fixture(scope="session")
def sync_db_url(pg_container):
    """Sync DB URL for Alembic (psycopg2)."""
    host = pg_container.get_container_host_ip()
    port = pg_container.get_exposed_port(5432)
    return f"postgresql://test:test@{host}:{port}/test"


@pytest.fixture(scope="session", autouse=True)
def _run_migrations(sync_db_url):
    """Run alembic upgrade head against the container."""
    os.environ["DATABASE_URL"] = sync_db_url
    from alembic import command
    from alembic.config import Config

    db_dir = os.path.join(os.path.dirname(__file__), "..", "..", "..", "db")
    alembic_cfg = Config(os.path.join(db_dir, "alembic.ini"))
    alembic_cfg.set_main_option("script_location", os.path.join(db_dir, "alembic"))
    alembic_cfg.set_main_option("sqlalchemy.url", sync_db_url)
    command.upgrade(alembic_cfg, "head")


@pytest.fixture(scope="session")
def async_engine(db_url, _run_migrations):
    """Create an async engine pointing at the test container."""
    engine = create_async_engine(db_url, echo=False, poolclass=NullPool)
    yield engine


@pytest.fixture(scope="session", autouse=True)
def _patch_db_module(async_engine):
    """Point ratedb.database globals at the test container.

    ``ratecompare.seed`` imported ``SessionLocal`` by name at collection
    time, so its local reference is patched too.
    """
    import ratedb.database as db_mod

    import ratecompare.seed as seed_mod

    test_session_factory = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    db_mod.engine = async_engine
    db_mod.SessionLocal = test_session_factory
    db_mod.db_service = db_mod.DatabaseService(engine=async_engine)
    seed_mod.SessionLocal = test_session_factory


# ---------------------------------------------------------------------------
# Function-scoped: per-test session with savepoint rollback
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def db_session(async_engine):
    """Per-test DB session with savepoint rollback."""
    conn = await async_engine.connect()
    txn = await conn.begin()
    session = AsyncSession(
        bind=conn,
        join_transaction_mode="create_savepoint",
        expire_on_commit=False,
    )
    yield session
    await session.close()
    await txn.rollback()
    await conn.close()


@pytest.fixture
def http_client(db_session):
    """Async httpx client against the real app, bound to ``db_session``."""
    import ratedb.database as db_mod
    from ratedb import get_db, get_db_service

    from ratecompare.main import app

    async def _get_db():
        yield db_session

    async def _get_db_service():
        return db_mod.db_service

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_service] = _get_db_service
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    yield httpx.AsyncClient(transport=transport, base_url="http://test")

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Catalog helper
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def catalog_rows(db_session):
    """Two active lenders, one inactive, and rates across them."""
    from decimal import Decimal

    from ratedb import Lender, MortgageRate
    from ratedb.enums import LoanTerm, LoanType

    harbor = Lender(name="Harbor Bank", logo_url="https://example.com/harbor.png")
    summit = Lender(name="Summit Bank")
    dormant = Lender(name="Dormant Bank", is_active=False)
    db_session.add_all([harbor, summit, dormant])
    await db_session.flush()

    def rate(lender, apr, **overrides):
        data = {
            "lender_id": lender.id,
            "loan_type": LoanType.CONVENTIONAL,
            "loan_term": LoanTerm.YEARS_30,
            "interest_rate": Decimal("6.000"),
            "apr": Decimal(apr),
            "points": Decimal("0.00"),
            "min_credit_score": 700,
            "max_loan_amount": Decimal("500000.00"),
            "min_down_payment_percent": Decimal("10.00"),
        }
        data.update(overrides)
        return MortgageRate(**data)

    rows = {
        "harbor": harbor,
        "summit": summit,
        "dormant": dormant,
        "harbor_30": rate(harbor, "6.300", closing_costs=Decimal("4200.00")),
        "summit_30": rate(summit, "6.200"),
        "summit_inactive": rate(summit, "5.000", is_active=False),
        "dormant_30": rate(dormant, "4.000"),
        "harbor_fha": rate(harbor, "6.900", loan_type=LoanType.FHA),
    }
    db_session.add_all([v for k, v in rows.items() if k.endswith(("_30", "_inactive", "_fha"))])
    await db_session.flush()
    return rows
