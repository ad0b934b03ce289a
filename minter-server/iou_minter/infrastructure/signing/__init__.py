"""Optional wallet-signing integration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import (
    DisabledSigningService,
    SigningPayload,
    SigningPayloadStatus,
    SigningService,
    SigningServiceError,
)
from .xumm import XummSigningService

if TYPE_CHECKING:
    from iou_minter.core.config import WalletSigningSettings


def build_signing_service(settings: WalletSigningSettings) -> SigningService:
    if not settings.configured:
        return DisabledSigningService()
    return XummSigningService(
        settings.api_key,
        settings.api_secret.get_secret_value(),
        base_url=settings.base_url,
        timeout=settings.timeout,
    )


__all__ = [
    "SigningService",
    "SigningServiceError",
    "SigningPayload",
    "SigningPayloadStatus",
    "DisabledSigningService",
    "XummSigningService",
    "build_signing_service",
]
