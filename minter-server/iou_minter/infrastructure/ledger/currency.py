"""Currency code helpers for issued assets."""

from __future__ import annotations

import re

_HEX_CODE = re.compile(r"^[0-9A-Fa-f]{40}$")


def encode_currency_code(code: str) -> str:
    """Return the code as the ledger stores it, or raise ``ValueError``.

    Three-character codes are used verbatim; 40-character codes must already be
    hex; other names are ASCII hex-encoded and right-padded to 160 bits.
    """
    if not code.isascii():
        raise ValueError(f"currency code {code!r} must be ASCII")
    if len(code) == 3:
        return code
    if _HEX_CODE.match(code):
        return code.upper()
    if len(code) == 40:
        raise ValueError(f"40-character currency code {code!r} must be hex")
    if len(code) > 20:
        raise ValueError(f"currency code {code!r} is longer than 20 bytes")
    return code.encode("ascii").hex().upper().ljust(40, "0")


def currency_matches(ledger_value: str, code: str) -> bool:
    encoded = encode_currency_code(code)
    if len(encoded) == 40:
        return ledger_value.upper() == encoded
    return ledger_value == encoded


__all__ = ["encode_currency_code", "currency_matches"]
