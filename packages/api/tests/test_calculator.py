# This project was developed with assistance from AI tools.
"""Tests for amortization math and rounding helpers."""

from decimal import Decimal

import pytest

from ratecompare.services.calculator import (
    amortized_payment,
    percent_of,
    round_half_up,
    to_decimal,
    total_interest,
)


def test_thirty_year_payment_at_six_percent():
    assert amortized_payment(Decimal("400000"), Decimal("6.000"), 30) == Decimal("2398.20")


def test_total_interest_uses_rounded_payment():
    # 2398.20 * 360 - 400000
    assert total_interest(Decimal("400000"), Decimal("6.000"), 30) == Decimal("463352.00")


def test_zero_rate_is_straight_line():
    assert amortized_payment(Decimal("360000"), Decimal("0"), 30) == Decimal("1000.00")
    assert total_interest(Decimal("360000"), Decimal("0"), 30) == Decimal("0.00")


def test_shorter_term_means_higher_payment_and_less_interest():
    p15 = amortized_payment(Decimal("400000"), Decimal("6.000"), 15)
    p30 = amortized_payment(Decimal("400000"), Decimal("6.000"), 30)
    assert p15 > p30
    assert total_interest(Decimal("400000"), Decimal("6.000"), 15) < total_interest(
        Decimal("400000"), Decimal("6.000"), 30
    )


def test_payment_has_two_decimal_places():
    payment = amortized_payment(Decimal("123456.78"), Decimal("7.125"), 20)
    assert payment == payment.quantize(Decimal("0.01"))
    assert payment.as_tuple().exponent == -2


def test_payment_is_monotonic_in_rate():
    low = amortized_payment(Decimal("300000"), Decimal("5.500"), 30)
    high = amortized_payment(Decimal("300000"), Decimal("5.625"), 30)
    assert high > low


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2.345", "2.35"),
        ("2.344", "2.34"),
        ("-2.345", "-2.35"),
        ("0.005", "0.01"),
    ],
)
def test_round_half_up_ties_away_from_zero(value, expected):
    assert round_half_up(Decimal(value)) == Decimal(expected)


def test_percent_of():
    assert percent_of(Decimal("100000"), Decimal("500000")) == Decimal("20.00")
    assert percent_of(1, 3) == Decimal("33.33")
    assert percent_of(2, 3) == Decimal("66.67")


def test_to_decimal_avoids_float_noise():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(5) == Decimal("5")
    assert to_decimal("6.125") == Decimal("6.125")
