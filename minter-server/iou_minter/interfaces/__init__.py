"""Outer interfaces (HTTP)."""
