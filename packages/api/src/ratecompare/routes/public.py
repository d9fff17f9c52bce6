# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

import logging

from fastapi import APIRouter, Depends
from ratedb import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.quote import MortgageQuote, QuoteRequestCreate
from ..services.catalog import RateCatalog, get_rate_catalog
from ..services.quote_requests import create_quote_request
from ..services.quotes import compute_quotes

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/quotes", response_model=list[MortgageQuote])
async def get_quotes(
    req: QuoteRequestCreate,
    catalog: RateCatalog = Depends(get_rate_catalog),
    session: AsyncSession = Depends(get_db),
) -> list[MortgageQuote]:
    """Return quotes for the submitted borrower profile, lowest APR first.

    An empty list means no lender product fits the profile.
    """
    quotes = await compute_quotes(catalog, req)

    if settings.RECORD_QUOTE_REQUESTS:
        await create_quote_request(session, req)

    return quotes
