"""Hosted wallet-signing capability used for counterparty trustline set-up."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Protocol


class SigningServiceError(Exception):
    """Raised when the signing capability is unavailable or the hosted service fails."""


@dataclass(slots=True, frozen=True)
class SigningPayload:
    id: str
    link: Optional[str]
    qr: Optional[str]


@dataclass(slots=True, frozen=True)
class SigningPayloadStatus:
    signed: bool
    expired: bool
    account: Optional[str]
    txid: Optional[str]


class SigningService(Protocol):
    enabled: bool

    async def create_payload(self, tx_json: dict[str, Any], *, instruction: Optional[str] = None) -> SigningPayload:
        ...

    async def get_payload_status(self, payload_id: str) -> SigningPayloadStatus:
        ...

    async def aclose(self) -> None:
        ...


class DisabledSigningService:
    """Stand-in used when no signing credentials are configured."""

    enabled = False

    async def create_payload(self, tx_json: dict[str, Any], *, instruction: Optional[str] = None) -> SigningPayload:
        raise SigningServiceError("钱包签名服务未启用（缺少 API key/secret）")

    async def get_payload_status(self, payload_id: str) -> SigningPayloadStatus:
        raise SigningServiceError("钱包签名服务未启用")

    async def aclose(self) -> None:
        return None


__all__ = [
    "SigningService",
    "SigningServiceError",
    "SigningPayload",
    "SigningPayloadStatus",
    "DisabledSigningService",
]
