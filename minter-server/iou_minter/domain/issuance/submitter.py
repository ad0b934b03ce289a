"""Construction, signing and submission of issuer payments."""

from __future__ import annotations

import asyncio
import logging
import re
from typing import TYPE_CHECKING, Any

from xrpl.asyncio.clients.exceptions import XRPLRequestFailureException
from xrpl.asyncio.transaction import XRPLReliableSubmissionException, autofill, sign, submit_and_wait
from xrpl.constants import XRPLException
from xrpl.models.amounts import IssuedCurrencyAmount
from xrpl.models.transactions import Payment

from iou_minter.infrastructure.ledger.currency import encode_currency_code

from .exceptions import (
    IssuanceError,
    SubmissionError,
    SubmissionTimeoutError,
    TransactionFailedError,
)
from .models import SubmissionReceipt

if TYPE_CHECKING:
    from iou_minter.core.identity import IssuingIdentity
    from iou_minter.infrastructure.ledger import LedgerConnectionManager

logger = logging.getLogger(__name__)

SUCCESS_CODE = "tesSUCCESS"
_RESULT_CODE = re.compile(r"(?P<code>\b(?:tec|tef|tel|tem|ter)[A-Z_]+\b)(?::\s*(?P<message>.*))?")
# raised by the library once the validated ledger passes LastLedgerSequence
_EXPIRED_MARKER = "greater than LastLedgerSequence"


def _classify_rejection(exc: XRPLReliableSubmissionException) -> IssuanceError:
    """Split consensus-layer (``tec``) outcomes from pre-consensus rejections."""
    text = str(exc)
    if _EXPIRED_MARKER in text:
        return SubmissionError(f"transaction expired before validation: {text}", code="expired")
    match = _RESULT_CODE.search(text)
    if match is None:
        return SubmissionError(f"ledger rejected submission: {text}")
    code = match.group("code")
    message = match.group("message") or text
    if code.startswith("tec"):
        return TransactionFailedError(code, message)
    return SubmissionError(f"ledger rejected submission: {code} - {message}", code=code)


class TransactionSubmitter:
    """Signs and submits payments from the issuing identity one at a time.

    Every submission consumes the identity's next sequence number, so the
    autofill/sign/submit window is guarded by a lock shared by all callers.
    """

    def __init__(
        self,
        connection: LedgerConnectionManager,
        identity: IssuingIdentity,
        currency: str,
        *,
        submit_timeout: float = 60.0,
    ) -> None:
        self.connection = connection
        self.identity = identity
        self.currency = currency
        self.submit_timeout = submit_timeout
        self._lock = asyncio.Lock()

    def build_payment(self, recipient: str, value: str) -> Payment:
        # no Paths / SendMax: the issuer pays straight from its own obligation
        return Payment(
            account=self.identity.address,
            destination=recipient,
            amount=IssuedCurrencyAmount(
                currency=encode_currency_code(self.currency),
                issuer=self.identity.address,
                value=value,
            ),
        )

    async def submit_payment(self, recipient: str, value: str) -> SubmissionReceipt:
        try:
            payment = self.build_payment(recipient, value)
        except XRPLException as exc:
            raise SubmissionError(f"invalid payment: {exc}", code="malformed_transaction") from exc

        async with self._lock:
            client = await self.connection.get_client()
            try:
                response = await asyncio.wait_for(
                    self._sign_and_submit(payment, client), timeout=self.submit_timeout
                )
            except asyncio.TimeoutError as exc:
                logger.error("向 %s 发送 %s 等待共识超时", recipient, value)
                raise SubmissionTimeoutError(
                    f"transaction not validated within {self.submit_timeout:g}s"
                ) from exc
            except XRPLReliableSubmissionException as exc:
                raise _classify_rejection(exc) from exc
            except XRPLRequestFailureException as exc:
                code = getattr(exc, "error", None)
                message = getattr(exc, "error_message", None) or str(exc)
                raise SubmissionError(f"ledger rejected submission: {code} - {message}", code=code) from exc
            except XRPLException as exc:
                raise SubmissionError(f"ledger rejected submission: {exc}") from exc
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("向 %s 提交交易时连接异常: %s", recipient, exc)
                raise SubmissionError(f"submission outcome unknown: {exc}", code="transport_error") from exc

        receipt = self._to_receipt(response.result)
        logger.info(
            "已向 %s 发行 %s %s (hash=%s, ledger=%s)",
            recipient,
            value,
            self.currency,
            receipt.transaction_hash,
            receipt.ledger_index,
        )
        return receipt

    async def _sign_and_submit(self, payment: Payment, client: Any) -> Any:
        prepared = await autofill(payment, client)
        signed = sign(prepared, self.identity.wallet)
        return await submit_and_wait(signed, client)

    @staticmethod
    def _to_receipt(result: dict) -> SubmissionReceipt:
        meta = result.get("meta") or {}
        code = meta.get("TransactionResult") if isinstance(meta, dict) else None
        code = code or result.get("engine_result")
        if code != SUCCESS_CODE:
            message = result.get("engine_result_message") or "unknown error"
            raise TransactionFailedError(code or "unknown", message)
        tx_hash = result.get("hash") or (result.get("tx_json") or {}).get("hash")
        if not tx_hash:
            raise SubmissionError("validated response carried no transaction hash", code="missing_hash")
        ledger_index = result.get("ledger_index") or result.get("validated_ledger_index")
        return SubmissionReceipt(transaction_hash=tx_hash, ledger_index=ledger_index)


__all__ = ["TransactionSubmitter", "SUCCESS_CODE"]
