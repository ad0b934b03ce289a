"""Mint journal domain exports"""

from .models import MintRecordEntry
from .service import MintJournalService

__all__ = ["MintRecordEntry", "MintJournalService"]
