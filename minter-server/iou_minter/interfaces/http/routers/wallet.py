"""Hosted wallet-signing hand-off for counterparty trustlines."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from iou_minter.domain.issuance import IssuanceError, IssuanceService
from iou_minter.infrastructure.signing import SigningService, SigningServiceError
from iou_minter.interfaces.http.deps import get_issuance_service, get_signing_service
from iou_minter.schemas import (
    ErrorResponse,
    TrustSetPayloadRequest,
    TrustSetPayloadResponse,
    TrustSetStatusResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message=message).model_dump(),
    )


@router.post(
    "/trustset-payload",
    response_model=TrustSetPayloadResponse,
    responses={400: {"model": ErrorResponse}},
    summary="生成一键建立信任线的签名请求",
)
async def create_trustset_payload(
    payload: Optional[TrustSetPayloadRequest] = None,
    issuance: IssuanceService = Depends(get_issuance_service),
    signing: SigningService = Depends(get_signing_service),
):
    if not signing.enabled:
        return _error("钱包签名服务未启用（缺少 API key/secret）")
    try:
        tx_json = issuance.trustset_template(payload.limit if payload else None)
    except IssuanceError as exc:
        return _error(exc.message)

    limit = tx_json["LimitAmount"]["value"]
    instruction = f"Add trustline: {issuance.currency} issued by {issuance.issuer} (limit {limit})"
    try:
        created = await signing.create_payload(tx_json, instruction=instruction)
    except SigningServiceError as exc:
        logger.error("创建信任线签名请求失败: %s", exc)
        return _error(str(exc))
    return TrustSetPayloadResponse(uuid=created.id, link=created.link, qr=created.qr)


@router.get(
    "/trustset-status",
    response_model=TrustSetStatusResponse,
    responses={400: {"model": ErrorResponse}},
    summary="查询信任线签名状态",
)
async def get_trustset_status(
    uuid: Optional[str] = None,
    signing: SigningService = Depends(get_signing_service),
):
    if not signing.enabled:
        return _error("钱包签名服务未启用")
    if not uuid:
        return _error("缺少 uuid")
    try:
        result = await signing.get_payload_status(uuid)
    except SigningServiceError as exc:
        return _error(str(exc))
    return TrustSetStatusResponse(
        signed=result.signed,
        expired=result.expired,
        account=result.account,
        txid=result.txid,
    )
