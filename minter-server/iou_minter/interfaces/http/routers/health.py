"""Service health endpoint."""

from fastapi import APIRouter, Depends

from iou_minter.core.container import ApplicationContainer
from iou_minter.interfaces.http.deps import get_app_container
from iou_minter.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="健康检查")
async def health(container: ApplicationContainer = Depends(get_app_container)) -> HealthResponse:
    return HealthResponse(
        issuer=container.identity.address,
        currency=container.settings.currency,
        endpoint=container.settings.ledger.endpoint,
        wallet_signing_enabled=container.signing.enabled,
    )
