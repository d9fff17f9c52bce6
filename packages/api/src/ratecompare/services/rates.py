# This project was developed with assistance from AI tools.
"""Rate sheet administration service.

Rates always belong to an existing lender; creates and lender reassignments
are checked before writing.
"""

import logging

from ratedb import Lender, MortgageRate
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.rate import MortgageRateCreate
from .lenders import LenderNotFoundError

logger = logging.getLogger(__name__)


class RateNotFoundError(LookupError):
    """Raised when a mortgage rate id does not exist."""

    def __init__(self, rate_id: int):
        super().__init__(f"Mortgage rate with id {rate_id} not found")
        self.rate_id = rate_id


_UPDATABLE_FIELDS = {
    "lender_id",
    "loan_type",
    "loan_term",
    "interest_rate",
    "apr",
    "points",
    "min_credit_score",
    "max_loan_amount",
    "min_down_payment_percent",
    "closing_costs",
    "is_active",
}

# Columns that accept an explicit None (clear the value)
_NULLABLE_FIELDS = {"closing_costs"}


async def _require_lender(session: AsyncSession, lender_id: int) -> Lender:
    lender = await session.get(Lender, lender_id)
    if lender is None:
        raise LenderNotFoundError(lender_id)
    return lender


async def create_rate(session: AsyncSession, data: MortgageRateCreate) -> MortgageRate:
    """Insert a rate for an existing lender.

    Raises:
        LenderNotFoundError: ``data.lender_id`` does not exist.
    """
    await _require_lender(session, data.lender_id)

    rate = MortgageRate(**data.model_dump())
    session.add(rate)
    await session.commit()
    await session.refresh(rate)
    logger.info(
        "Created rate %s for lender %s: %s/%s @ %s",
        rate.id,
        rate.lender_id,
        rate.loan_type.value,
        rate.loan_term.value,
        rate.interest_rate,
    )
    return rate


async def list_rates(session: AsyncSession) -> list[MortgageRate]:
    """Active rates belonging to active lenders, in catalog order."""
    stmt = (
        select(MortgageRate)
        .join(Lender, MortgageRate.lender_id == Lender.id)
        .where(MortgageRate.is_active.is_(True), Lender.is_active.is_(True))
        .order_by(MortgageRate.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_rate(session: AsyncSession, rate_id: int) -> MortgageRate | None:
    return await session.get(MortgageRate, rate_id)


async def update_rate(session: AsyncSession, rate_id: int, **updates) -> MortgageRate:
    """Apply a partial update.

    ``None`` clears nullable columns (closing_costs) and is ignored for the rest.

    Raises:
        RateNotFoundError: no rate with ``rate_id``.
        LenderNotFoundError: ``lender_id`` is being changed to an unknown lender.
    """
    rate = await get_rate(session, rate_id)
    if rate is None:
        raise RateNotFoundError(rate_id)

    new_lender_id = updates.get("lender_id")
    if new_lender_id is not None:
        await _require_lender(session, new_lender_id)

    for field, value in updates.items():
        if field not in _UPDATABLE_FIELDS:
            continue
        if value is None and field not in _NULLABLE_FIELDS:
            continue
        setattr(rate, field, value)

    await session.commit()
    await session.refresh(rate)
    return rate
