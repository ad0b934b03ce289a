"""Ledger access infrastructure."""

from .connection import LedgerConnectionManager
from .currency import currency_matches, encode_currency_code

__all__ = ["LedgerConnectionManager", "currency_matches", "encode_currency_code"]
