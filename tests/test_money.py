"""Unit tests for reais/cents conversions."""

from decimal import Decimal

import pytest

from catpay.common.money import from_cents, to_cents


def test_to_cents_rounds_half_up_at_cent_boundary():
    assert to_cents(19.999) == 2000
    assert to_cents(0.005) == 1
    assert to_cents(1.005) == 101


def test_to_cents_accepts_ints_and_decimals():
    assert to_cents(15) == 1500
    assert to_cents(Decimal("10.50")) == 1050


def test_from_cents_does_not_round():
    assert from_cents(1999) == 19.99
    assert from_cents(1) == 0.01
    assert from_cents(0) == 0


@pytest.mark.parametrize("cents", [0, 1, 7, 10, 99, 100, 1999, 123456, 10**9 + 7])
def test_cents_round_trip(cents):
    """Whole cents survive a trip through major units."""

    assert to_cents(from_cents(cents)) == cents


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), Decimal("NaN")])
def test_to_cents_rejects_non_finite_amounts(value):
    with pytest.raises(ValueError):
        to_cents(value)
