"""
Exact rational arithmetic helpers.

Every amount and fraction in the core is a Fraction. Decimal strings only appear
at the edges: parsing user/file input, and formatting for display or persistence.
"""

import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Union

from rebalancer.core.exceptions import DivisionByZeroError, InvalidInputError

RationalLike = Union[int, str, Decimal, Fraction]

HUNDRED = Fraction(100)

# Dollar amount typed by a user, e.g. 1000.00
DOLLAR_AMOUNT_PATTERN = re.compile(r"^\d+(\.\d{2})?$")


def parse_rational(value: RationalLike) -> Fraction:
    """
    Convert a numeric input to an exact Fraction.

    Accepts int, Decimal, Fraction or a decimal string. Floats are refused.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidInputError(f"Unsupported numeric type: {type(value).__name__}")
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidInputError(f"Invalid numeric value: {value}")
        return Fraction(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            dec = Decimal(text)
        except InvalidOperation:
            raise InvalidInputError(f"Invalid numeric value: {value!r}")
        if not dec.is_finite():
            raise InvalidInputError(f"Invalid numeric value: {value!r}")
        return Fraction(dec)
    raise InvalidInputError(f"Unsupported numeric type: {type(value).__name__}")


def parse_dollar_amount(text: str) -> Fraction:
    """Parse a holdings cell such as "$1234.56" into a non-negative Fraction."""
    cleaned = text.strip()
    if cleaned.startswith("$"):
        cleaned = cleaned[1:].strip()
    amount = parse_rational(cleaned)
    if amount < 0:
        raise InvalidInputError(f"Dollar amount must not be negative: {text!r}")
    return amount


def is_dollar_amount(text: str) -> bool:
    """Return True if text is a well-formed dollar amount (digits, optional .NN)."""
    return bool(DOLLAR_AMOUNT_PATTERN.match(text.strip()))


def validate_dollar_amount(text: str) -> Fraction:
    """Validate user-entered dollar text and return it as a Fraction."""
    if not is_dollar_amount(text):
        raise InvalidInputError("Input must be in the format of a dollar amount")
    return parse_rational(text)


def safe_divide(numerator: Fraction, denominator: Fraction, what: str = "fraction") -> Fraction:
    """Divide exactly, raising DivisionByZeroError instead of ZeroDivisionError."""
    if denominator == 0:
        raise DivisionByZeroError(what)
    return numerator / denominator


def round_cents(value: Fraction) -> Decimal:
    """Round a rational to 2 decimal places, ties away from zero."""
    scaled = abs(value) * 100
    cents = int(scaled)
    if scaled - cents >= Fraction(1, 2):
        cents += 1
    if value < 0:
        cents = -cents
    return Decimal(cents).scaleb(-2)


def format_plain(value: Fraction) -> str:
    """Format a rational as a 2-place decimal string, e.g. "1234.50"."""
    return f"{round_cents(value):.2f}"


def format_money(value: Fraction) -> str:
    """Format a rational as dollars, e.g. "$1234.50" or "-$3.00"."""
    rounded = round_cents(value)
    if rounded < 0:
        return f"-${-rounded:.2f}"
    return f"${rounded:.2f}"


def format_percent(fraction: Fraction) -> str:
    """Format a fraction as a percentage, e.g. Fraction(3, 5) -> "60.00%"."""
    return f"{round_cents(fraction * HUNDRED):.2f}%"
