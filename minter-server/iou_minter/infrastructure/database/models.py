"""SQLAlchemy ORM models."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text

from .base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MintRecord(Base):
    __tablename__ = "mint_records"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    batch_id = Column(String(36), index=True)
    item_index = Column(Integer, nullable=False, default=0)
    recipient = Column(String(64), nullable=False, index=True)
    amount = Column(String(64), nullable=False)
    currency = Column(String(40), nullable=False)
    ok = Column(Boolean, nullable=False, default=False)
    tx_hash = Column(String(64))
    ledger_index = Column(Integer)
    error_code = Column(String(64))
    error_message = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utc_now, index=True)
