"""Issuance domain specific exceptions."""

from __future__ import annotations

from typing import Optional


class IssuanceError(Exception):
    """Base class for issuance domain errors.

    ``code`` carries the ledger result code (``tecPATH_DRY``, ``temBAD_AMOUNT``...)
    or a local identifier so callers can report it without parsing messages.
    """

    default_code: Optional[str] = None

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class ValidationError(IssuanceError):
    """Raised for client-caused input problems (address, amount, batch size)."""

    default_code = "validation_error"


class PrecisionExceeded(ValidationError):
    """Raised when an amount has more significant digits than the ledger can encode."""

    default_code = "precision_exceeded"


class TrustlineError(IssuanceError):
    """Base class for counterparty trustline precondition failures."""


class NoTrustlineError(TrustlineError):
    """Raised when the recipient never authorised holding the issued asset."""

    default_code = "no_trustline"


class InsufficientLimitError(TrustlineError):
    """Raised when the recipient's trustline limit is below the requested amount."""

    default_code = "insufficient_limit"


class LedgerConnectionError(IssuanceError):
    """Raised when the ledger node cannot be reached."""

    default_code = "connection_error"


class LedgerRequestError(IssuanceError):
    """Raised when the ledger answers a query with an error result."""

    default_code = "ledger_request_error"


class SubmissionError(IssuanceError):
    """Raised when a transaction is rejected before it reaches consensus."""

    default_code = "submission_error"


class SubmissionTimeoutError(SubmissionError):
    """Raised when consensus validation does not complete within the configured window."""

    default_code = "submission_timeout"


class TransactionFailedError(IssuanceError):
    """Raised when consensus includes the transaction with a non-success result."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"ledger payment failed: {code} - {message}", code=code)
        self.ledger_message = message


class StartupConfigurationError(Exception):
    """Raised when the process configuration makes it unsafe to serve requests."""


__all__ = [
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
