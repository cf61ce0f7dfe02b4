"""Literal barcode fields: due-date factor, amount and our-number segments"""

import logging
from datetime import date, timedelta
from typing import Literal, Tuple

from boleto_gateway.domain.exceptions import AmountTooLargeError, InvalidAmountError, InvalidFieldError
from boleto_gateway.domain.models import OUR_NUMBER_LENGTH, DigitField
from boleto_gateway.utils.date_utils import days_between

FactorMode = Literal["clamp", "rollover"]

# FEBRABAN counts days from 1997-10-07; 2000-07-03 is day 1000 of that scale.
FEBRABAN_BASE_DATE = date(1997, 10, 7)
REFERENCE_DATE = FEBRABAN_BASE_DATE + timedelta(days=1000)  # 2000-07-03
# Date on which the factor restarts at 1000 once 9999 is exhausted.
ROLLOVER_DATE = date(2025, 2, 22)

MIN_FACTOR = 1000
MAX_FACTOR = 9999
AMOUNT_WIDTH = 10


def _raw_due_date_factor(due_date: date, mode: FactorMode) -> int:
    if mode not in ("clamp", "rollover"):
        raise ValueError(f"Unknown due date factor mode: {mode!r}")

    if mode == "rollover" and days_between(ROLLOVER_DATE, due_date) >= 0:
        return MIN_FACTOR + days_between(ROLLOVER_DATE, due_date)
    return MIN_FACTOR + days_between(REFERENCE_DATE, due_date)


def due_date_factor(due_date: date, mode: FactorMode = "clamp") -> int:
    """
    Map a due date to its 4-digit FEBRABAN factor.

    Modes:
    - clamp: 1000 + days since 2000-07-03
    - rollover: same as clamp before 2025-02-22, then 1000 + days since 2025-02-22

    The result is always clamped to [1000, 9999].

    Example:
        2000-07-03 -> 1000
        2024-05-10 -> 9712
        2030-01-01 -> 9999 (clamp), 2774 (rollover)
    """
    factor = _raw_due_date_factor(due_date, mode)
    if factor >= MAX_FACTOR:
        return MAX_FACTOR
    if factor < MIN_FACTOR:
        return MIN_FACTOR
    return factor


def is_due_date_factor_clamped(due_date: date, mode: FactorMode = "clamp") -> bool:
    """True when the raw factor fell outside [1000, 9999] and was pinned to a bound"""
    factor = _raw_due_date_factor(due_date, mode)
    return factor < MIN_FACTOR or factor > MAX_FACTOR


def format_due_date_factor(due_date: date, mode: FactorMode = "clamp") -> str:
    """Due-date factor as exactly 4 digits"""
    return f"{due_date_factor(due_date, mode):04d}"


def format_amount(amount_cents: int) -> str:
    """
    Render an amount in minor units as the 10-digit amount field.

    Raises:
        InvalidAmountError: amount is negative or not an integer
        AmountTooLargeError: amount needs more than 10 digits
    """
    if isinstance(amount_cents, bool) or not isinstance(amount_cents, int):
        raise InvalidAmountError(f"Amount must be an integer number of cents, got {amount_cents!r}")
    if amount_cents < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount_cents}")

    digits = str(amount_cents)
    if len(digits) > AMOUNT_WIDTH:
        raise AmountTooLargeError(f"Amount {amount_cents} exceeds the {AMOUNT_WIDTH}-digit amount field")
    return digits.zfill(AMOUNT_WIDTH)


def split_our_number(our_number: str) -> Tuple[str, str, str]:
    """
    Split the our-number into the three segments placed in the free field.

    Only the first 15 digits are used: [0:3], [3:6] and [6:15].

    Raises:
        InvalidFieldError: fewer than 15 characters or non-digit content
    """
    if not isinstance(our_number, str) or len(our_number) < OUR_NUMBER_LENGTH:
        raise InvalidFieldError(f"our_number must have at least {OUR_NUMBER_LENGTH} digits")

    DigitField.of(our_number, name="our_number")
    if len(our_number) > OUR_NUMBER_LENGTH:
        logging.warning(
            "Ignoring our_number digits beyond position %d",
            OUR_NUMBER_LENGTH,
            extra={"our_number_length": len(our_number)},
        )

    head = our_number[:OUR_NUMBER_LENGTH]
    return head[0:3], head[3:6], head[6:15]
