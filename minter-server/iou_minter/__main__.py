"""Process entry point: ``python -m iou_minter``."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from iou_minter.core.config import get_settings
from iou_minter.core.container import ApplicationContainer
from iou_minter.core.logging import configure_logging
from iou_minter.domain.issuance import StartupConfigurationError
from iou_minter.main import create_app

logger = logging.getLogger("iou_minter")


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging("INFO")
        logger.critical("配置无效: %s", exc)
        sys.exit(1)

    configure_logging(settings.logging.level)
    try:
        container = ApplicationContainer.from_settings(settings)
    except StartupConfigurationError as exc:
        logger.critical("启动配置错误: %s", exc)
        sys.exit(1)

    options = {
        "host": settings.host,
        "port": settings.port,
        "log_level": settings.logging.level.lower(),
    }
    if settings.server.reload:
        # reload requires an import string
        uvicorn.run("iou_minter.main:create_app", factory=True, reload=True, **options)
    else:
        uvicorn.run(create_app(container), **options)


if __name__ == "__main__":
    main()
