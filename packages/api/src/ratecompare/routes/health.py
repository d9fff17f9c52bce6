# This project was developed with assistance from AI tools.
"""Health check routes."""

from fastapi import APIRouter, Depends
from ratedb import DatabaseService, get_db_service

from .. import __version__
from ..schemas.health import ComponentHealth

router = APIRouter()


@router.get("/", response_model=list[ComponentHealth])
async def health_check(
    db_service: DatabaseService = Depends(get_db_service),
) -> list[ComponentHealth]:
    """Report API and database health."""
    db_ok = await db_service.health_check()
    return [
        ComponentHealth(
            name="API",
            status="healthy",
            message="Rate Compare API is running",
            version=__version__,
        ),
        ComponentHealth(
            name="Database",
            status="healthy" if db_ok else "unhealthy",
            message="PostgreSQL connection OK" if db_ok else "PostgreSQL connection failed",
        ),
    ]
