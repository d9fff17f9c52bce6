# This project was developed with assistance from AI tools.
"""Borrower quote request log routes."""

from fastapi import APIRouter, Depends, Query, status
from ratedb import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas import Pagination
from ..schemas.quote import QuoteRequestCreate, QuoteRequestListResponse, QuoteRequestResponse
from ..services import quote_requests as request_service

router = APIRouter()


@router.post("/", response_model=QuoteRequestResponse, status_code=status.HTTP_201_CREATED)
async def create_quote_request(
    body: QuoteRequestCreate,
    session: AsyncSession = Depends(get_db),
) -> QuoteRequestResponse:
    request = await request_service.create_quote_request(session, body)
    return QuoteRequestResponse.model_validate(request)


@router.get("/", response_model=QuoteRequestListResponse)
async def list_quote_requests(
    session: AsyncSession = Depends(get_db),
    offset: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
) -> QuoteRequestListResponse:
    """List stored borrower submissions, newest first."""
    requests, total = await request_service.list_quote_requests(
        session, offset=offset, limit=limit
    )
    return QuoteRequestListResponse(
        data=[QuoteRequestResponse.model_validate(r) for r in requests],
        pagination=Pagination(
            total=total,
            offset=offset,
            limit=limit,
            has_more=(offset + limit < total),
        ),
    )
