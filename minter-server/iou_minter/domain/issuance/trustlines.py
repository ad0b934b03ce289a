"""Counterparty trustline lookup and pre-submission guard."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Optional

from xrpl.models.requests import AccountLines

from iou_minter.infrastructure.ledger.currency import currency_matches

from .exceptions import (
    InsufficientLimitError,
    LedgerConnectionError,
    LedgerRequestError,
    NoTrustlineError,
)
from .models import TrustlineRecord

if TYPE_CHECKING:
    from iou_minter.infrastructure.ledger import LedgerConnectionManager

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND = "actNotFound"


class TrustlineVerifier:
    """Reads the recipient's trust relationships for the configured asset.

    The check only avoids predictable ``tecPATH_DRY`` rejections; the ledger
    enforces the real constraint at submission time, so a limit change between
    check and submit is tolerated.
    """

    def __init__(self, connection: LedgerConnectionManager, issuer: str, currency: str) -> None:
        self.connection = connection
        self.issuer = issuer
        self.currency = currency

    async def find_trustline(self, account: str) -> Optional[TrustlineRecord]:
        client = await self.connection.get_client()
        marker: Any = None
        while True:
            result = await self._account_lines(client, account, marker)
            if result is None:
                return None
            for line in result.get("lines") or []:
                if line.get("account") == self.issuer and currency_matches(line.get("currency", ""), self.currency):
                    return TrustlineRecord(
                        currency=line["currency"],
                        issuer=self.issuer,
                        counterparty=account,
                        limit=str(line.get("limit", "0")),
                        balance=str(line.get("balance", "0")),
                        raw=line,
                    )
            marker = result.get("marker")
            if marker is None:
                return None

    async def ensure_trustline(self, recipient: str, needed_amount: str) -> TrustlineRecord:
        line = await self.find_trustline(recipient)
        if line is None:
            raise NoTrustlineError(f"收款方尚未对 {self.issuer} 建立 {self.currency} 信任线")
        limit = line.limit_value
        if limit is not None and limit < Decimal(needed_amount):
            raise InsufficientLimitError(f"收款方信任线额度不足（limit={line.limit} < need={needed_amount}）")
        return line

    async def _account_lines(self, client: Any, account: str, marker: Any) -> Optional[dict]:
        request = AccountLines(account=account, peer=self.issuer, ledger_index="validated", marker=marker)
        try:
            response = await client.request(request)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("查询 %s 信任线失败: %s", account, exc)
            raise LedgerConnectionError(f"account_lines request failed: {exc}") from exc
        if response.is_successful():
            return response.result
        error = response.result.get("error")
        if error == ACCOUNT_NOT_FOUND:
            return None
        message = response.result.get("error_message") or error or "unknown error"
        raise LedgerRequestError(f"account_lines rejected: {message}", code=error)


__all__ = ["TrustlineVerifier"]
