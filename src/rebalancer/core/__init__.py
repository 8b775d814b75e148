"""Core utilities: exact numerics, errors, time."""

from rebalancer.core.timezone import now_eastern, EASTERN_TZ
from rebalancer.core.exceptions import (
    AppError,
    ValidationError,
    InvalidInputError,
    NotFoundError,
    DivisionByZeroError,
    DegenerateAllocationWarning,
)
from rebalancer.core.numeric import (
    parse_rational,
    parse_dollar_amount,
    is_dollar_amount,
    validate_dollar_amount,
    safe_divide,
    round_cents,
    format_money,
    format_percent,
    format_plain,
)

__all__ = [
    "now_eastern",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "InvalidInputError",
    "NotFoundError",
    "DivisionByZeroError",
    "DegenerateAllocationWarning",
    "parse_rational",
    "parse_dollar_amount",
    "is_dollar_amount",
    "validate_dollar_amount",
    "safe_divide",
    "round_cents",
    "format_money",
    "format_percent",
    "format_plain",
]
