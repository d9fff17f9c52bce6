# This project was developed with assistance from AI tools.
"""Rate catalog read interface.

The quote engine depends on ``RateCatalog`` only. The API injects a
``SqlRateCatalog`` bound to the request session; tests inject in-memory
catalogs with the same two methods.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

from fastapi import Depends
from ratedb import Lender, MortgageRate, get_db
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.catalog import LenderRecord, RateRecord

logger = logging.getLogger(__name__)


class CatalogUnavailableError(RuntimeError):
    """Raised when the catalog store cannot be read."""

    pass


class RateCatalog(Protocol):
    async def list_active_lenders(self) -> Sequence[LenderRecord]:
        """All lenders with is_active=true."""
        ...

    async def list_active_rates(self) -> Sequence[RateRecord]:
        """Active rate records of active lenders, in stable catalog order."""
        ...


class SqlRateCatalog:
    """Catalog backed by the lenders / mortgage_rates tables."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active_lenders(self) -> list[LenderRecord]:
        stmt = select(Lender).where(Lender.is_active.is_(True)).order_by(Lender.id)
        rows = await self._fetch(stmt, "lenders")
        return [LenderRecord.model_validate(row) for row in rows]

    async def list_active_rates(self) -> list[RateRecord]:
        stmt = (
            select(MortgageRate)
            .join(Lender, MortgageRate.lender_id == Lender.id)
            .where(MortgageRate.is_active.is_(True), Lender.is_active.is_(True))
            .order_by(MortgageRate.id)
        )
        rows = await self._fetch(stmt, "rates")
        return [RateRecord.model_validate(row) for row in rows]

    async def _fetch(self, stmt, what: str):
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception("Catalog read failed (%s)", what)
            raise CatalogUnavailableError(f"Rate catalog unavailable: could not read {what}") from exc
        return result.scalars().all()


async def get_rate_catalog(session: AsyncSession = Depends(get_db)) -> RateCatalog:
    """FastAPI dependency: a catalog bound to the request's session."""
    return SqlRateCatalog(session)
