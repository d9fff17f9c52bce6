# This project was developed with assistance from AI tools.
"""Rate sheet administration routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from ratedb import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.rate import MortgageRateCreate, MortgageRateResponse, MortgageRateUpdate
from ..services import rates as rate_service
from ..services.lenders import LenderNotFoundError
from ..services.rates import RateNotFoundError

router = APIRouter()


@router.get("/", response_model=list[MortgageRateResponse])
async def list_rates(
    session: AsyncSession = Depends(get_db),
) -> list[MortgageRateResponse]:
    """Active rates from active lenders."""
    rates = await rate_service.list_rates(session)
    return [MortgageRateResponse.model_validate(rate) for rate in rates]


@router.post("/", response_model=MortgageRateResponse, status_code=status.HTTP_201_CREATED)
async def create_rate(
    body: MortgageRateCreate,
    session: AsyncSession = Depends(get_db),
) -> MortgageRateResponse:
    try:
        rate = await rate_service.create_rate(session, body)
    except LenderNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return MortgageRateResponse.model_validate(rate)


@router.get("/{rate_id}", response_model=MortgageRateResponse)
async def get_rate(
    rate_id: int,
    session: AsyncSession = Depends(get_db),
) -> MortgageRateResponse:
    rate = await rate_service.get_rate(session, rate_id)
    if rate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Mortgage rate not found",
        )
    return MortgageRateResponse.model_validate(rate)


@router.patch("/{rate_id}", response_model=MortgageRateResponse)
async def update_rate(
    rate_id: int,
    body: MortgageRateUpdate,
    session: AsyncSession = Depends(get_db),
) -> MortgageRateResponse:
    """Partially update a rate. ``closing_costs: null`` clears the amount."""
    try:
        rate = await rate_service.update_rate(
            session, rate_id, **body.model_dump(exclude_unset=True)
        )
    except (RateNotFoundError, LenderNotFoundError) as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return MortgageRateResponse.model_validate(rate)
