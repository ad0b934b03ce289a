"""Domain models for asset issuance."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal, Mapping, Optional


@dataclass(slots=True, frozen=True)
class TrustlineRecord:
    currency: str
    issuer: str
    counterparty: str
    limit: str
    balance: str = "0"
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def limit_value(self) -> Optional[Decimal]:
        """Numeric limit, or ``None`` when the ledger value is not comparable."""
        try:
            value = Decimal(self.limit)
        except (ArithmeticError, ValueError, TypeError):
            return None
        return value if value.is_finite() else None


@dataclass(slots=True, frozen=True)
class MintRequest:
    recipient: Any
    amount: Any


@dataclass(slots=True, frozen=True)
class SubmissionReceipt:
    transaction_hash: str
    ledger_index: Optional[int]


@dataclass(slots=True, frozen=True)
class MintResult:
    index: int
    recipient: str
    amount: str
    receipt: Optional[SubmissionReceipt] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.receipt is not None

    @classmethod
    def success(cls, index: int, recipient: str, amount: str, receipt: SubmissionReceipt) -> "MintResult":
        return cls(index=index, recipient=recipient, amount=amount, receipt=receipt)

    @classmethod
    def failure(
        cls, index: int, recipient: str, amount: str, message: str, code: Optional[str] = None
    ) -> "MintResult":
        return cls(index=index, recipient=recipient, amount=amount, error=message, error_code=code)


@dataclass(slots=True, frozen=True)
class BatchResult:
    results: tuple[MintResult, ...]

    @property
    def ok_count(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def err_count(self) -> int:
        return len(self.results) - self.ok_count

    @property
    def status(self) -> Literal["success", "partial"]:
        return "success" if self.err_count == 0 else "partial"


__all__ = [
    "TrustlineRecord",
    "MintRequest",
    "SubmissionReceipt",
    "MintResult",
    "BatchResult",
]
