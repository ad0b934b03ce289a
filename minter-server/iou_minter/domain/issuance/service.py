"""Issuance domain service: single and batch minting of the configured asset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence

from iou_minter.infrastructure.ledger.currency import encode_currency_code

from .exceptions import IssuanceError, ValidationError
from .models import BatchResult, MintRequest, MintResult, SubmissionReceipt, TrustlineRecord
from .submitter import TransactionSubmitter
from .trustlines import TrustlineVerifier
from .validators import assert_precision, parse_amount, require_address

logger = logging.getLogger(__name__)

# largest issued-currency value the ledger can represent
MAX_TRUST_LIMIT = Decimal("9999999999999999e80")


@dataclass(slots=True)
class IssuanceService:
    trustlines: TrustlineVerifier
    submitter: TransactionSubmitter
    max_batch_items: int
    max_amount: Decimal
    default_trust_limit: Decimal = Decimal("1000000")

    @property
    def issuer(self) -> str:
        return self.submitter.identity.address

    @property
    def currency(self) -> str:
        return self.submitter.currency

    async def check_trustline(self, address: Any) -> Optional[TrustlineRecord]:
        return await self.trustlines.find_trustline(require_address(address))

    async def send_asset(self, recipient: str, amount: str) -> SubmissionReceipt:
        """Precision and trustline guards, then one payment from the issuer."""
        assert_precision(amount)
        await self.trustlines.ensure_trustline(recipient, amount)
        return await self.submitter.submit_payment(recipient, amount)

    async def mint_single(self, recipient: Any, amount: Any) -> MintResult:
        address = require_address(recipient)
        value = parse_amount(amount, self.max_amount)
        receipt = await self.send_asset(address, value)
        return MintResult.success(0, address, value, receipt)

    async def mint_batch(self, items: Sequence[Any]) -> BatchResult:
        """Mint every item in order; one item's failure never stops the rest.

        Items run strictly one after another: each payment takes the next
        sequence number of the issuing identity.
        """
        if not items:
            raise ValidationError("items 不可为空", code="empty_batch")
        if len(items) > self.max_batch_items:
            raise ValidationError(f"一次最多 {self.max_batch_items} 笔", code="batch_too_large")

        results: tuple[MintResult, ...] = ()
        for index, request in enumerate(self._to_requests(items)):
            results = (*results, await self._mint_item(index, request))
        batch = BatchResult(results=results)
        logger.info("批量发行完成: %d 成功, %d 失败", batch.ok_count, batch.err_count)
        return batch

    def trustset_template(self, limit: Any = None) -> dict[str, Any]:
        """TrustSet transaction a counterparty signs to accept the asset."""
        value = parse_amount(self.default_trust_limit if limit is None else limit, MAX_TRUST_LIMIT)
        return {
            "TransactionType": "TrustSet",
            "LimitAmount": {
                "currency": encode_currency_code(self.currency),
                "issuer": self.issuer,
                "value": value,
            },
        }

    async def _mint_item(self, index: int, request: MintRequest) -> MintResult:
        recipient = "" if request.recipient is None else str(request.recipient)
        raw_amount = "" if request.amount is None else str(request.amount)
        try:
            address = require_address(request.recipient)
            value = parse_amount(request.amount, self.max_amount)
            receipt = await self.send_asset(address, value)
        except IssuanceError as exc:
            logger.warning("批量第 %d 笔 (%s) 失败: %s", index, recipient, exc.message)
            return MintResult.failure(index, recipient, raw_amount, exc.message, exc.code)
        except Exception as exc:  # pylint: disable=broad-except
            logger.exception("批量第 %d 笔 (%s) 出现未预期错误", index, recipient)
            return MintResult.failure(index, recipient, raw_amount, str(exc) or type(exc).__name__, "internal_error")
        return MintResult.success(index, address, value, receipt)

    @staticmethod
    def _to_requests(items: Iterable[Any]) -> Iterable[MintRequest]:
        for item in items:
            if isinstance(item, MintRequest):
                yield item
            elif isinstance(item, Mapping):
                yield MintRequest(recipient=item.get("to"), amount=item.get("amount"))
            else:
                yield MintRequest(recipient=None, amount=None)


__all__ = ["IssuanceService"]
