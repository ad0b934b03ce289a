"""Domain model for journaled mint outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class MintRecordEntry:
    id: str
    batch_id: Optional[str]
    item_index: int
    recipient: str
    amount: str
    currency: str
    ok: bool
    tx_hash: Optional[str]
    ledger_index: Optional[int]
    error_code: Optional[str]
    error_message: Optional[str]
    created_at: Optional[datetime]
