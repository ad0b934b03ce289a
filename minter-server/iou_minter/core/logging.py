"""Process-wide logging setup."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), stream=sys.stdout, format=LOG_FORMAT)
    # xrpl-py websocket chatter is only useful when debugging the transport
    logging.getLogger("websockets").setLevel(logging.WARNING)


__all__ = ["configure_logging", "LOG_FORMAT"]
