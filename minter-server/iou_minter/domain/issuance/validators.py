"""Stateless checks that run before any ledger round-trip."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from xrpl.core.addresscodec import is_valid_classic_address

from .exceptions import PrecisionExceeded, ValidationError

# Issued-currency amounts carry a 54-bit mantissa: 16 significant decimal digits.
MAX_SIGNIFICANT_DIGITS = 16


def is_valid_address(value: Any) -> bool:
    """Syntactic and checksum validation of a classic account address."""
    if not isinstance(value, str) or not value:
        return False
    try:
        return is_valid_classic_address(value)
    except Exception:  # pylint: disable=broad-except
        return False


def significant_digits(amount: str) -> int:
    plain = amount.replace(".", "", 1).lstrip("0")
    return len(plain)


def assert_precision(amount: str) -> None:
    if significant_digits(amount) > MAX_SIGNIFICANT_DIGITS:
        raise PrecisionExceeded(
            f"amount {amount} exceeds the {MAX_SIGNIFICANT_DIGITS} significant digit limit"
        )


def format_amount(value: Decimal) -> str:
    """Plain decimal notation without exponent or trailing fractional zeros."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_amount(raw: Any, max_amount: Decimal) -> str:
    """Parse a JSON amount exactly and return it normalised, or raise ``ValidationError``.

    Accepts strings and numbers; floats go through ``str`` so that ``0.1`` stays ``0.1``.
    Precision is checked before the range, so an over-long amount reports
    ``PrecisionExceeded`` whatever the configured maximum.
    """
    range_error = ValidationError(f"数量必须在 0 ~ {format_amount(max_amount)} 之间", code="invalid_amount")
    if isinstance(raw, bool) or raw is None:
        raise range_error
    try:
        value = Decimal(str(raw).strip()) if isinstance(raw, (str, float)) else Decimal(raw)
    except (InvalidOperation, TypeError, ValueError):
        raise range_error from None
    if not value.is_finite() or value <= 0:
        raise range_error
    text = format_amount(value)
    assert_precision(text)
    if value > max_amount:
        raise range_error
    return text


def require_address(value: Any) -> str:
    if not is_valid_address(value):
        raise ValidationError("接收地址格式错误", code="invalid_address")
    return value


__all__ = [
    "MAX_SIGNIFICANT_DIGITS",
    "is_valid_address",
    "significant_digits",
    "assert_precision",
    "format_amount",
    "parse_amount",
    "require_address",
]
