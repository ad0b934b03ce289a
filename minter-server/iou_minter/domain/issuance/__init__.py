"""Issuance domain exports"""

from .exceptions import (
    InsufficientLimitError,
    IssuanceError,
    LedgerConnectionError,
    LedgerRequestError,
    NoTrustlineError,
    PrecisionExceeded,
    StartupConfigurationError,
    SubmissionError,
    SubmissionTimeoutError,
    TransactionFailedError,
    TrustlineError,
    ValidationError,
)
from .models import BatchResult, MintRequest, MintResult, SubmissionReceipt, TrustlineRecord
from .service import IssuanceService
from .submitter import TransactionSubmitter
from .trustlines import TrustlineVerifier

__all__ = [
    "BatchResult",
    "MintRequest",
    "MintResult",
    "SubmissionReceipt",
    "TrustlineRecord",
    "IssuanceService",
    "TransactionSubmitter",
    "TrustlineVerifier",
    "IssuanceError",
    "ValidationError",
    "PrecisionExceeded",
    "TrustlineError",
    "NoTrustlineError",
    "InsufficientLimitError",
    "LedgerConnectionError",
    "LedgerRequestError",
    "SubmissionError",
    "SubmissionTimeoutError",
    "TransactionFailedError",
    "StartupConfigurationError",
]
