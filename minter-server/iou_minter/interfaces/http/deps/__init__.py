"""Reusable FastAPI dependencies."""

from .container import get_app_container, get_db_session, get_issuance_service, get_signing_service

__all__ = [
    "get_app_container",
    "get_db_session",
    "get_issuance_service",
    "get_signing_service",
]
