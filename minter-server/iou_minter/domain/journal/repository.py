"""Repository protocol for the mint journal."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from iou_minter.infrastructure.database.models import MintRecord as MintRecordModel


class MintRecordRepository(Protocol):
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
    ) -> MintRecordModel:
        ...

    async def list_records(self, limit: int, offset: int) -> Sequence[MintRecordModel]:
        ...
