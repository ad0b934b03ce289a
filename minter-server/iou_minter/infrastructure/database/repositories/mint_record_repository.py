"""SQLAlchemy implementation for the mint journal"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from iou_minter.infrastructure.database.models import MintRecord


class SqlMintRecordRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_record(
        self,
        *,
        batch_id: Optional[str],
        item_index: int,
        recipient: str,
        amount: str,
        currency: str,
        ok: bool,
        tx_hash: Optional[str],
        ledger_index: Optional[int],
        error_code: Optional[str],
        error_message: Optional[str],
    ) -> MintRecord:
        record = MintRecord(
            batch_id=batch_id,
            item_index=item_index,
            recipient=recipient,
            amount=amount,
            currency=currency,
            ok=ok,
            tx_hash=tx_hash,
            ledger_index=ledger_index,
            error_code=error_code,
            error_message=error_message,
        )
        self.session.add(record)
        await self.session.flush()
        return record

    async def list_records(self, limit: int, offset: int) -> list[MintRecord]:
        stmt = (
            select(MintRecord)
            .order_by(desc(MintRecord.created_at), desc(MintRecord.item_index))
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
