"""Trustline lookup endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from iou_minter.domain.issuance import IssuanceError, IssuanceService
from iou_minter.interfaces.http.deps import get_issuance_service
from iou_minter.schemas import ErrorResponse, TrustlineCheckResponse

router = APIRouter()


@router.get(
    "/check-trustline",
    response_model=TrustlineCheckResponse,
    responses={400: {"model": ErrorResponse}},
    summary="查询地址是否已对发行方建立信任线",
)
async def check_trustline(
    to: Optional[str] = None,
    issuance: IssuanceService = Depends(get_issuance_service),
):
    try:
        line = await issuance.check_trustline(to)
    except IssuanceError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(message=exc.message).model_dump(),
        )
    return TrustlineCheckResponse(has_trustline=line is not None, line=dict(line.raw) if line else None)
