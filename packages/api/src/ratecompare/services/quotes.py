# This project was developed with assistance from AI tools.
"""Quote engine: match a borrower profile against the rate catalog.

``compute_quotes`` reads the catalog once and hands the snapshot to
``match_quotes``, which is synchronous and side-effect free. Results are
ordered by APR ascending; records with equal APR keep catalog order.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ..schemas.catalog import LenderRecord, RateRecord
from ..schemas.quote import MortgageQuote, QuoteRequestCreate
from .calculator import amortized_payment, percent_of, round_half_up
from .catalog import RateCatalog

logger = logging.getLogger(__name__)


class InvalidProfileError(ValueError):
    """Raised when derived ratios are undefined for the submitted profile."""

    pass


@dataclass(frozen=True)
class ProfileRatios:
    """Per-request values shared by every quote in one response."""

    down_payment_percent: Decimal
    loan_to_value_ratio: Decimal


def derive_ratios(profile: QuoteRequestCreate) -> ProfileRatios:
    """Down payment percent and LTV, each rounded to two decimals."""
    if profile.property_value <= 0:
        raise InvalidProfileError(
            f"property_value must be positive to price a loan (got {profile.property_value})."
        )
    return ProfileRatios(
        down_payment_percent=percent_of(profile.down_payment, profile.property_value),
        loan_to_value_ratio=percent_of(profile.loan_amount, profile.property_value),
    )


def is_eligible(rate: RateRecord, profile: QuoteRequestCreate, ratios: ProfileRatios) -> bool:
    """Whether ``rate`` may be offered to ``profile``.

    Lender status is checked by the caller. Property and occupancy type are
    not rate sheet criteria.
    """
    return (
        rate.is_active
        and rate.loan_type == profile.loan_type
        and rate.loan_term == profile.loan_term
        and rate.min_credit_score <= profile.credit_score
        and rate.max_loan_amount >= profile.loan_amount
        and rate.min_down_payment_percent <= ratios.down_payment_percent
    )


def build_quote(
    rate: RateRecord,
    lender: LenderRecord,
    profile: QuoteRequestCreate,
    ratios: ProfileRatios,
) -> MortgageQuote:
    years = rate.loan_term.years
    monthly_payment = amortized_payment(profile.loan_amount, rate.interest_rate, years)
    total_interest = round_half_up(monthly_payment * years * 12 - profile.loan_amount)

    return MortgageQuote(
        rate_id=rate.id,
        lender_id=lender.id,
        lender_name=lender.name,
        lender_logo_url=lender.logo_url,
        loan_type=rate.loan_type,
        loan_term=rate.loan_term,
        interest_rate=rate.interest_rate,
        apr=rate.apr,
        points=rate.points,
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        closing_costs=rate.closing_costs,
        down_payment_percent=ratios.down_payment_percent,
        loan_to_value_ratio=ratios.loan_to_value_ratio,
    )


def match_quotes(
    lenders: Iterable[LenderRecord],
    rates: Iterable[RateRecord],
    profile: QuoteRequestCreate,
    ratios: ProfileRatios | None = None,
) -> list[MortgageQuote]:
    """Filter, price and rank a catalog snapshot for one profile.

    ``ratios`` are derived from ``profile`` when not supplied.
    """
    if ratios is None:
        ratios = derive_ratios(profile)
    active_lenders = {lender.id: lender for lender in lenders if lender.is_active}

    quotes = []
    for rate in rates:
        lender = active_lenders.get(rate.lender_id)
        if lender is None or not is_eligible(rate, profile, ratios):
            continue
        quotes.append(build_quote(rate, lender, profile, ratios))

    # list.sort is stable: equal APRs keep catalog order
    quotes.sort(key=lambda q: q.apr)
    return quotes


async def compute_quotes(catalog: RateCatalog, profile: QuoteRequestCreate) -> list[MortgageQuote]:
    """Ranked quotes for ``profile`` against the current catalog.

    Raises:
        InvalidProfileError: property_value is not positive.
        CatalogUnavailableError: the catalog read failed (propagated as-is).
    """
    # Reject before touching the catalog
    ratios = derive_ratios(profile)

    lenders = await catalog.list_active_lenders()
    rates = await catalog.list_active_rates()
    quotes = match_quotes(lenders, rates, profile, ratios)

    logger.info(
        "Matched %d of %d active rates for %s/%s (credit_score=%d)",
        len(quotes),
        len(rates),
        profile.loan_type.value,
        profile.loan_term.value,
        profile.credit_score,
    )
    return quotes
