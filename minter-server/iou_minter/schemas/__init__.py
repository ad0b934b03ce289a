"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    ok: bool = False
    message: str


class MintErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
    code: Optional[str] = None


class HealthResponse(CamelModel):
    ok: bool = True
    issuer: str
    currency: str
    endpoint: str
    wallet_signing_enabled: bool


class TrustlineCheckResponse(CamelModel):
    ok: bool = True
    has_trustline: bool
    line: Optional[dict[str, Any]] = None


# amounts stay untyped here so bad values are reported per item, not as a 422
class MintSingleRequest(BaseModel):
    to: Any = None
    amount: Any = None


class MintSingleResponse(CamelModel):
    status: Literal["success"] = "success"
    hash: str
    ledger_index: Optional[int] = None


class MintBatchRequest(BaseModel):
    items: Any = Field(default_factory=list)


class MintItemResult(CamelModel):
    index: int
    to: str
    amount: str
    ok: bool
    hash: Optional[str] = None
    ledger_index: Optional[int] = None
    error: Optional[str] = None


class MintBatchResponse(CamelModel):
    status: Literal["success", "partial"]
    ok_count: int
    err_count: int
    results: list[MintItemResult]


class TrustSetPayloadRequest(BaseModel):
    limit: Any = None


class TrustSetPayloadResponse(BaseModel):
    ok: bool = True
    uuid: str
    link: Optional[str] = None
    qr: Optional[str] = None


class TrustSetStatusResponse(BaseModel):
    ok: bool = True
    signed: bool
    expired: bool
    account: Optional[str] = None
    txid: Optional[str] = None


class MintRecordResponse(CamelModel):
    id: str
    batch_id: Optional[str] = None
    index: int
    to: str
    amount: str
    currency: str
    ok: bool
    hash: Optional[str] = None
    ledger_index: Optional[int] = None
    error_code: Optional[str] = None
    error: Optional[str] = None
    created_at: Optional[datetime] = None


class MintRecordListResponse(BaseModel):
    ok: bool = True
    records: list[MintRecordResponse]
