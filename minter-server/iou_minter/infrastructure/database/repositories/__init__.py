"""SQLAlchemy repository implementations."""

from .mint_record_repository import SqlMintRecordRepository

__all__ = ["SqlMintRecordRepository"]
