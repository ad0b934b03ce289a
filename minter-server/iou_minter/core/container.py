"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from iou_minter.core.config import Settings, get_settings
from iou_minter.core.identity import IssuingIdentity, load_issuing_identity
from iou_minter.domain.issuance import (
    IssuanceService,
    StartupConfigurationError,
    TransactionSubmitter,
    TrustlineVerifier,
)
from iou_minter.infrastructure.database import Database
from iou_minter.infrastructure.ledger import LedgerConnectionManager
from iou_minter.infrastructure.ledger.connection import ClientFactory
from iou_minter.infrastructure.signing import SigningService, build_signing_service

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    identity: IssuingIdentity
    ledger: LedgerConnectionManager
    issuance: IssuanceService
    signing: SigningService
    database: Database

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        client_factory: Optional[ClientFactory] = None,
        signing: Optional[SigningService] = None,
    ) -> "ApplicationContainer":
        secret = settings.issuer.secret.get_secret_value() if settings.issuer.secret else None
        check = load_issuing_identity(secret, settings.issuer.address)
        if not check.ok:
            raise StartupConfigurationError(check.error or "issuer identity is invalid")
        identity = check.identity

        ledger_kwargs: dict[str, Any] = {"connect_timeout": settings.ledger.connect_timeout}
        if client_factory is not None:
            ledger_kwargs["client_factory"] = client_factory
        ledger = LedgerConnectionManager(settings.ledger.endpoint, **ledger_kwargs)

        issuance = IssuanceService(
            trustlines=TrustlineVerifier(ledger, identity.address, settings.currency),
            submitter=TransactionSubmitter(
                ledger,
                identity,
                settings.currency,
                submit_timeout=settings.ledger.submit_timeout,
            ),
            max_batch_items=settings.max_batch_items,
            max_amount=settings.max_amount,
            default_trust_limit=settings.limits.default_trust_limit,
        )
        signing_service = signing if signing is not None else build_signing_service(settings.wallet_signing)
        if signing_service.enabled:
            logger.info("钱包签名服务已启用")
        else:
            logger.warning("未配置钱包签名服务，相关 API 将停用")

        return cls(
            settings=settings,
            identity=identity,
            ledger=ledger,
            issuance=issuance,
            signing=signing_service,
            database=Database(settings.database.url, echo=settings.database.echo or settings.debug),
        )

    async def startup(self) -> None:
        await self.database.init_models()

    async def shutdown(self) -> None:
        await self.ledger.close()
        await self.signing.aclose()
        await self.database.dispose()


def get_container() -> ApplicationContainer:
    return ApplicationContainer.from_settings(get_settings())


__all__ = ["ApplicationContainer", "get_container"]
