"""Issuer-side minting service for a single ledger-native asset."""

__version__ = "1.0.0"
