from fastapi import APIRouter

from .routers import health, mint, records, trustlines, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["状态"])
    router.include_router(trustlines.router, tags=["信任线"])
    router.include_router(mint.router, tags=["发行"])
    router.include_router(records.router, tags=["发行记录"])
    router.include_router(wallet.router, prefix="/wallet", tags=["钱包签名"])
    return router


__all__ = [
    "create_api_router",
]
