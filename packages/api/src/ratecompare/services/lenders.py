# This project was developed with assistance from AI tools.
"""Lender administration service."""

import logging

from ratedb import Lender
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.lender import LenderCreate

logger = logging.getLogger(__name__)


class LenderNotFoundError(LookupError):
    """Raised when a lender id does not exist."""

    def __init__(self, lender_id: int):
        super().__init__(f"Lender with id {lender_id} not found")
        self.lender_id = lender_id


_UPDATABLE_FIELDS = {
    "name",
    "logo_url",
    "website_url",
    "phone",
    "email",
    "is_active",
}

# Contact and branding columns that accept an explicit None (clear the value)
_NULLABLE_FIELDS = {"logo_url", "website_url", "phone", "email"}


async def create_lender(session: AsyncSession, data: LenderCreate) -> Lender:
    lender = Lender(**data.model_dump())
    session.add(lender)
    await session.commit()
    await session.refresh(lender)
    logger.info("Created lender %s (%s)", lender.id, lender.name)
    return lender


async def list_lenders(session: AsyncSession, *, include_inactive: bool = False) -> list[Lender]:
    """Return lenders ordered by name; active only unless ``include_inactive``."""
    stmt = select(Lender).order_by(Lender.name, Lender.id)
    if not include_inactive:
        stmt = stmt.where(Lender.is_active.is_(True))
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_lender(session: AsyncSession, lender_id: int) -> Lender | None:
    return await session.get(Lender, lender_id)


async def update_lender(session: AsyncSession, lender_id: int, **updates) -> Lender:
    """Apply a partial update. Unknown fields are ignored.

    ``None`` clears the contact and branding columns and is ignored for
    name and is_active.

    Raises:
        LenderNotFoundError: no lender with ``lender_id``.
    """
    lender = await get_lender(session, lender_id)
    if lender is None:
        raise LenderNotFoundError(lender_id)

    for field, value in updates.items():
        if field not in _UPDATABLE_FIELDS:
            continue
        if value is None and field not in _NULLABLE_FIELDS:
            continue
        setattr(lender, field, value)

    await session.commit()
    await session.refresh(lender)
    return lender
