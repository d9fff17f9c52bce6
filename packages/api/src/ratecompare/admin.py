# This project was developed with assistance from AI tools.
"""
SQLAdmin configuration for catalog administration UI

Access the admin panel at: http://localhost:8000/admin

When AUTH_DISABLED=false, requires admin credentials via login form.
When AUTH_DISABLED=true, admin panel is open (dev mode).
"""

from ratedb import DemoDataManifest, Lender, MortgageQuoteRequest, MortgageRate
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import create_engine
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings

# SQLAdmin requires a sync engine; derive from the async DATABASE_URL
_sync_url = settings.DATABASE_URL.replace("+asyncpg", "")
engine = create_engine(_sync_url, echo=False)


class AdminAuth(AuthenticationBackend):
    """Session-based auth gate for SQLAdmin."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username")
        password = form.get("password")
        if username == settings.SQLADMIN_USER and password == settings.SQLADMIN_PASSWORD:
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.AUTH_DISABLED:
            return True
        return request.session.get("admin_authenticated", False)


class LenderAdmin(ModelView, model=Lender):
    column_list = [
        Lender.id,
        Lender.name,
        Lender.website_url,
        Lender.is_active,
        Lender.updated_at,
    ]
    column_searchable_list = [Lender.name]
    column_sortable_list = [Lender.id, Lender.name, Lender.updated_at]
    column_default_sort = [(Lender.name, False)]
    name = "Lender"
    name_plural = "Lenders"
    icon = "fa-solid fa-building-columns"


class MortgageRateAdmin(ModelView, model=MortgageRate):
    column_list = [
        MortgageRate.id,
        MortgageRate.lender_id,
        MortgageRate.loan_type,
        MortgageRate.loan_term,
        MortgageRate.interest_rate,
        MortgageRate.apr,
        MortgageRate.min_credit_score,
        MortgageRate.is_active,
    ]
    column_sortable_list = [MortgageRate.id, MortgageRate.apr, MortgageRate.interest_rate]
    column_default_sort = [(MortgageRate.apr, False)]
    name = "Mortgage Rate"
    name_plural = "Mortgage Rates"
    icon = "fa-solid fa-percent"


class MortgageQuoteRequestAdmin(ModelView, model=MortgageQuoteRequest):
    column_list = [
        MortgageQuoteRequest.id,
        MortgageQuoteRequest.created_at,
        MortgageQuoteRequest.loan_type,
        MortgageQuoteRequest.loan_term,
        MortgageQuoteRequest.loan_amount,
        MortgageQuoteRequest.credit_score,
        MortgageQuoteRequest.zip_code,
    ]
    column_sortable_list = [MortgageQuoteRequest.id, MortgageQuoteRequest.created_at]
    column_default_sort = [(MortgageQuoteRequest.created_at, True)]
    can_create = False
    can_edit = False
    name = "Quote Request"
    name_plural = "Quote Requests"
    icon = "fa-solid fa-file-invoice-dollar"


class DemoDataManifestAdmin(ModelView, model=DemoDataManifest):
    column_list = [DemoDataManifest.id, DemoDataManifest.seeded_at, DemoDataManifest.config_hash]
    can_create = False
    can_edit = False
    can_delete = False
    name = "Seed Manifest"
    name_plural = "Seed Manifests"
    icon = "fa-solid fa-database"


def setup_admin(app):
    """Set up SQLAdmin and mount it to the FastAPI app."""
    auth_backend = AdminAuth(
        secret_key=settings.SQLADMIN_SECRET_KEY,
    )
    admin = Admin(app, engine, title="Rate Compare Admin", authentication_backend=auth_backend)

    admin.add_view(LenderAdmin)
    admin.add_view(MortgageRateAdmin)
    admin.add_view(MortgageQuoteRequestAdmin)
    admin.add_view(DemoDataManifestAdmin)

    return admin
