# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .admin import setup_admin
from .core.config import settings
from .routes import admin, health, lenders, public, quote_requests, rates
from .schemas.error import ErrorResponse
from .services.catalog import CatalogUnavailableError
from .services.quotes import InvalidProfileError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    from ratedb.database import db_service

    logger.info(
        "Starting %s (quote request logging %s)",
        settings.APP_NAME,
        "enabled" if settings.RECORD_QUOTE_REQUESTS else "disabled",
    )
    yield
    await db_service.close()


app = FastAPI(
    title="Rate Compare API",
    description="Mortgage rate comparison: lender rate sheets matched to borrower profiles",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

_HTTP_STATUS_TITLES: dict[int, str] = {
    400: "Bad Request",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def _request_id(request: Request) -> str:
    return request.headers.get("x-request-id", str(uuid.uuid4()))


def _build_error(status_code: int, detail: str, request_id: str) -> ErrorResponse:
    return ErrorResponse(
        type="about:blank",
        title=_HTTP_STATUS_TITLES.get(status_code, "Error"),
        status=status_code,
        detail=detail,
        request_id=request_id,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    body = _build_error(exc.status_code, str(exc.detail), _request_id(request))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    body = _build_error(422, str(exc.errors()), _request_id(request))
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(InvalidProfileError)
async def invalid_profile_handler(request: Request, exc: InvalidProfileError):
    """A profile whose loan ratios are undefined cannot be priced."""
    body = _build_error(422, str(exc), _request_id(request))
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(CatalogUnavailableError)
async def catalog_unavailable_handler(request: Request, exc: CatalogUnavailableError):
    """Catalog read failed; the caller may retry."""
    request_id = _request_id(request)
    logger.error("Catalog unavailable (request_id=%s): %s", request_id, exc)
    body = _build_error(503, str(exc), request_id)
    return JSONResponse(status_code=503, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = _request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = _build_error(500, "An unexpected error occurred.", request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])
app.include_router(lenders.router, prefix="/api/lenders", tags=["lenders"])
app.include_router(rates.router, prefix="/api/rates", tags=["rates"])
app.include_router(quote_requests.router, prefix="/api/quote-requests", tags=["quote-requests"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])

# Setup SQLAdmin dashboard at /admin
setup_admin(app)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to Rate Compare API"}
