# This project was developed with assistance from AI tools.
"""Lender administration routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from ratedb import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.lender import LenderCreate, LenderResponse, LenderUpdate
from ..services import lenders as lender_service
from ..services.lenders import LenderNotFoundError

router = APIRouter()


@router.get("/", response_model=list[LenderResponse])
async def list_lenders(
    include_inactive: bool = False,
    session: AsyncSession = Depends(get_db),
) -> list[LenderResponse]:
    """List lenders. Inactive lenders are hidden unless include_inactive=true."""
    lenders = await lender_service.list_lenders(session, include_inactive=include_inactive)
    return [LenderResponse.model_validate(lender) for lender in lenders]


@router.post("/", response_model=LenderResponse, status_code=status.HTTP_201_CREATED)
async def create_lender(
    body: LenderCreate,
    session: AsyncSession = Depends(get_db),
) -> LenderResponse:
    lender = await lender_service.create_lender(session, body)
    return LenderResponse.model_validate(lender)


@router.get("/{lender_id}", response_model=LenderResponse)
async def get_lender(
    lender_id: int,
    session: AsyncSession = Depends(get_db),
) -> LenderResponse:
    lender = await lender_service.get_lender(session, lender_id)
    if lender is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Lender not found",
        )
    return LenderResponse.model_validate(lender)


@router.patch("/{lender_id}", response_model=LenderResponse)
async def update_lender(
    lender_id: int,
    body: LenderUpdate,
    session: AsyncSession = Depends(get_db),
) -> LenderResponse:
    """Partially update a lender; deactivating hides its rates from quotes."""
    try:
        lender = await lender_service.update_lender(
            session, lender_id, **body.model_dump(exclude_unset=True)
        )
    except LenderNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return LenderResponse.model_validate(lender)
