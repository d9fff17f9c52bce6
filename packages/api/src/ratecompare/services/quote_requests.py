# This project was developed with assistance from AI tools.
"""Borrower quote request log.

Stores what borrowers asked for. The quotes computed for a request are
derived on demand and never written here.
"""

from ratedb import MortgageQuoteRequest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.quote import QuoteRequestCreate


async def create_quote_request(
    session: AsyncSession,
    profile: QuoteRequestCreate,
) -> MortgageQuoteRequest:
    request = MortgageQuoteRequest(**profile.model_dump())
    session.add(request)
    await session.commit()
    await session.refresh(request)
    return request


async def list_quote_requests(
    session: AsyncSession,
    *,
    offset: int = 0,
    limit: int = 20,
) -> tuple[list[MortgageQuoteRequest], int]:
    """Return one page of requests, newest first, with the total count."""
    total = (await session.execute(select(func.count(MortgageQuoteRequest.id)))).scalar() or 0

    stmt = (
        select(MortgageQuoteRequest)
        .order_by(MortgageQuoteRequest.created_at.desc(), MortgageQuoteRequest.id.desc())
        .offset(offset)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all()), total
