# This project was developed with assistance from AI tools.
"""Admin endpoints for demo data seeding."""

from fastapi import APIRouter, Depends, HTTPException, status
from ratedb import get_db
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.admin import SeedResponse, SeedStatusResponse
from ..services.seed.seeder import get_seed_status, seed_demo_data

router = APIRouter()


@router.post("/seed", response_model=SeedResponse, status_code=status.HTTP_200_OK)
async def seed_data(
    force: bool = False,
    session: AsyncSession = Depends(get_db),
) -> SeedResponse:
    """Seed demo lenders and rates. Pass force=true to re-seed.

    Simulated for demonstration purposes -- not real financial data.
    """
    result = await seed_demo_data(session, force=force)
    if result["status"] == "already_seeded":
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Demo data already seeded at {result['seeded_at']}. Use force=true to re-seed.",
        )
    return SeedResponse(**result)


@router.get("/seed/status", response_model=SeedStatusResponse)
async def seed_status(
    session: AsyncSession = Depends(get_db),
) -> SeedStatusResponse:
    """Check if demo data has been seeded."""
    result = await get_seed_status(session)
    return SeedStatusResponse(**result)
