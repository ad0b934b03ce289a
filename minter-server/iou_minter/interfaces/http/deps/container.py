"""Container backed dependency providers."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from iou_minter.core.container import ApplicationContainer
from iou_minter.domain.issuance import IssuanceService
from iou_minter.infrastructure.signing import SigningService


def get_app_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_issuance_service(container: ApplicationContainer = Depends(get_app_container)) -> IssuanceService:
    return container.issuance


def get_signing_service(container: ApplicationContainer = Depends(get_app_container)) -> SigningService:
    return container.signing


async def get_db_session(
    container: ApplicationContainer = Depends(get_app_container),
) -> AsyncGenerator[AsyncSession, None]:
    async for session in container.database.session():
        yield session


__all__ = [
    "get_app_container",
    "get_db_session",
    "get_issuance_service",
    "get_signing_service",
]
