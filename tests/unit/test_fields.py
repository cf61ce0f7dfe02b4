"""Unit tests for due-date factor, amount field and our-number segments"""

import logging
import pytest
from datetime import date, datetime, timedelta
from boleto_gateway.domain.exceptions import AmountTooLargeError, InvalidAmountError, InvalidFieldError
from boleto_gateway.domain.fields import (
    REFERENCE_DATE,
    due_date_factor,
    format_amount,
    format_due_date_factor,
    is_due_date_factor_clamped,
    split_our_number,
)


def test_due_date_factor_at_reference_date():
    assert REFERENCE_DATE == date(2000, 7, 3)
    assert due_date_factor(REFERENCE_DATE) == 1000
    assert format_due_date_factor(REFERENCE_DATE) == "1000"


def test_due_date_factor_counts_days():
    assert due_date_factor(date(2000, 7, 4)) == 1001
    assert due_date_factor(date(2024, 5, 10)) == 9712


def test_due_date_factor_floor_before_reference():
    assert due_date_factor(date(2000, 7, 2)) == 1000
    assert due_date_factor(date(1997, 10, 7)) == 1000


def test_due_date_factor_ceiling():
    """2025-02-20 is day 9998; from 2025-02-21 on the factor stays at 9999"""
    assert due_date_factor(date(2025, 2, 20)) == 9998
    assert due_date_factor(date(2025, 2, 21)) == 9999
    assert due_date_factor(date(2040, 1, 1)) == 9999


def test_due_date_factor_monotonic():
    """Non-decreasing across the whole range, including both bounds"""
    start = date(2000, 1, 1)
    factors = [due_date_factor(start + timedelta(days=i * 97)) for i in range(120)]
    assert factors == sorted(factors)
    assert min(factors) == 1000
    assert max(factors) == 9999


def test_due_date_factor_ignores_time_of_day():
    assert due_date_factor(datetime(2024, 5, 10, 23, 59)) == 9712


def test_due_date_factor_always_four_digits():
    for due in (date(1990, 1, 1), date(2001, 1, 1), date(2099, 12, 31)):
        assert len(format_due_date_factor(due)) == 4


def test_due_date_factor_rollover_restarts_at_1000():
    assert due_date_factor(date(2025, 2, 21), mode="rollover") == 9999
    assert due_date_factor(date(2025, 2, 22), mode="rollover") == 1000
    assert due_date_factor(date(2030, 1, 1), mode="rollover") == 2774
    assert due_date_factor(date(2030, 1, 1), mode="clamp") == 9999


def test_due_date_factor_rollover_matches_clamp_before_rollover_date():
    assert due_date_factor(date(2024, 5, 10), mode="rollover") == 9712


def test_due_date_factor_is_days_since_reference_plus_1000():
    for due in (date(2000, 7, 3), date(2010, 1, 1), date(2024, 5, 10), date(2025, 2, 21)):
        assert due_date_factor(due) == 1000 + (due - REFERENCE_DATE).days


def test_factor_at_exact_bounds_is_not_clamped():
    """1000 and 9999 are reached by the day count itself, not by pinning"""
    assert not is_due_date_factor_clamped(date(2000, 7, 3))
    assert not is_due_date_factor_clamped(date(2025, 2, 21))
    assert not is_due_date_factor_clamped(date(2024, 5, 10))


def test_factor_outside_range_is_clamped():
    assert is_due_date_factor_clamped(date(2000, 7, 2))
    assert is_due_date_factor_clamped(date(2025, 2, 22))
    assert is_due_date_factor_clamped(date(2040, 1, 1))


def test_rollover_factor_is_not_clamped_after_restart():
    assert not is_due_date_factor_clamped(date(2025, 2, 22), mode="rollover")
    assert not is_due_date_factor_clamped(date(2030, 1, 1), mode="rollover")
    assert is_due_date_factor_clamped(date(1999, 1, 1), mode="rollover")


def test_due_date_factor_unknown_mode():
    with pytest.raises(ValueError):
        due_date_factor(date(2024, 5, 10), mode="wrap")


def test_format_amount_pads_to_ten_digits():
    assert format_amount(123400) == "0000123400"
    assert format_amount(0) == "0000000000"
    assert format_amount(9_999_999_999) == "9999999999"


def test_format_amount_too_large():
    with pytest.raises(AmountTooLargeError):
        format_amount(10_000_000_000)
    with pytest.raises(AmountTooLargeError):
        format_amount(123456789012)


@pytest.mark.parametrize("amount", [-1, 12.5, "123400", True, None])
def test_format_amount_rejects_invalid_values(amount):
    with pytest.raises(InvalidAmountError):
        format_amount(amount)


def test_split_our_number():
    assert split_our_number("123456789012345") == ("123", "456", "789012345")


def test_split_our_number_ignores_extra_digits(caplog):
    with caplog.at_level(logging.WARNING):
        segments = split_our_number("12345678901234567")

    assert segments == ("123", "456", "789012345")
    assert "Ignoring our_number digits" in caplog.text


@pytest.mark.parametrize("our_number", ["12345678901234", "", "12345678901234X", "123-456-789-012"])
def test_split_our_number_rejects_malformed_values(our_number):
    with pytest.raises(InvalidFieldError):
        split_our_number(our_number)
