import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from iou_minter import __version__
from iou_minter.core.container import ApplicationContainer, get_container
from iou_minter.interfaces.http import create_api_router

logger = logging.getLogger(__name__)

MINT_ROUTES = {"mint-single", "mint-batch"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    await container.startup()
    logger.info(
        "发行服务已启动: issuer=%s currency=%s endpoint=%s",
        container.identity.address,
        container.settings.currency,
        container.settings.ledger.endpoint,
    )
    try:
        yield
    finally:
        await container.shutdown()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "; ".join(str(error.get("msg", "")) for error in exc.errors()) or "请求格式错误"
    if request.url.path.rstrip("/").rsplit("/", 1)[-1] in MINT_ROUTES:
        content = {"status": "error", "message": message}
    else:
        content = {"ok": False, "message": message}
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def create_app(container: Optional[ApplicationContainer] = None) -> FastAPI:
    """Build the application; raises ``StartupConfigurationError`` on a bad issuer setup."""
    container = container or get_container()
    settings = container.settings

    app = FastAPI(
        title=settings.project_name,
        description="单一发行方 IOU 发行服务",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(create_api_router(settings.api_prefix))
    return app
