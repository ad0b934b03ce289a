"""Mint journal service"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from iou_minter.domain.issuance.models import MintResult
from iou_minter.infrastructure.database.models import MintRecord as MintRecordModel, generate_uuid
from iou_minter.infrastructure.database.repositories import SqlMintRecordRepository

from .models import MintRecordEntry
from .repository import MintRecordRepository


@dataclass(slots=True)
class MintJournalService:
    repository: MintRecordRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "MintJournalService":
        return cls(SqlMintRecordRepository(session))

    async def record(self, result: MintResult, currency: str, batch_id: Optional[str] = None) -> MintRecordEntry:
        receipt = result.receipt
        row = await self.repository.add_record(
            batch_id=batch_id,
            item_index=result.index,
            recipient=result.recipient,
            amount=result.amount,
            currency=currency,
            ok=result.ok,
            tx_hash=receipt.transaction_hash if receipt else None,
            ledger_index=receipt.ledger_index if receipt else None,
            error_code=result.error_code,
            error_message=result.error,
        )
        return self._to_entry(row)

    async def record_batch(self, results: Iterable[MintResult], currency: str) -> list[MintRecordEntry]:
        batch_id = generate_uuid()
        return [await self.record(result, currency, batch_id=batch_id) for result in results]

    async def list_records(self, limit: int = 50, offset: int = 0) -> list[MintRecordEntry]:
        rows = await self.repository.list_records(limit, offset)
        return [self._to_entry(row) for row in rows]

    @staticmethod
    def _to_entry(model: MintRecordModel) -> MintRecordEntry:
        return MintRecordEntry(
            id=model.id,
            batch_id=model.batch_id,
            item_index=model.item_index,
            recipient=model.recipient,
            amount=model.amount,
            currency=model.currency,
            ok=model.ok,
            tx_hash=model.tx_hash,
            ledger_index=model.ledger_index,
            error_code=model.error_code,
            error_message=model.error_message,
            created_at=model.created_at,
        )
