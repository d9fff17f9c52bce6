# This project was developed with assistance from AI tools.
"""Fixed-rate amortization math.

Pure math, no I/O. All arithmetic is done in ``Decimal``; only final
currency and percentage outputs are rounded, half away from zero.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

CENT = Decimal("0.01")

# Enough digits that (1 + r) ** 360 keeps full cent accuracy on jumbo principals.
_WORKING_PRECISION = 40


def to_decimal(value) -> Decimal:
    """Coerce ints, floats and strings to Decimal without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value, places: Decimal = CENT) -> Decimal:
    """Round to ``places`` with ties away from zero (2.345 -> 2.35, -2.345 -> -2.35)."""
    return to_decimal(value).quantize(places, rounding=ROUND_HALF_UP)


def percent_of(part, whole) -> Decimal:
    """``part / whole * 100`` rounded to two decimals."""
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        return round_half_up(to_decimal(part) / to_decimal(whole) * 100)


def amortized_payment(principal, annual_rate_pct, term_years: int) -> Decimal:
    """Monthly payment that retires ``principal`` over ``term_years``.

    P = L * [r(1+r)^n] / [(1+r)^n - 1], with r the monthly rate and n the
    number of payments. A zero rate falls back to straight-line repayment.
    """
    principal = to_decimal(principal)
    n_payments = term_years * 12

    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        monthly_rate = to_decimal(annual_rate_pct) / 100 / 12

        if monthly_rate == 0:
            payment = principal / n_payments
        else:
            compound = (1 + monthly_rate) ** n_payments
            payment = principal * (monthly_rate * compound) / (compound - 1)

        return round_half_up(payment)


def total_interest(principal, annual_rate_pct, term_years: int) -> Decimal:
    """Interest paid over the life of the loan at the rounded monthly payment."""
    payment = amortized_payment(principal, annual_rate_pct, term_years)
    return round_half_up(payment * term_years * 12 - to_decimal(principal))
