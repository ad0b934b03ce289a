"""Single reusable websocket session with a ledger node."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

from xrpl.asyncio.clients import AsyncWebsocketClient

from iou_minter.domain.issuance.exceptions import LedgerConnectionError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], Any]


class LedgerConnectionManager:
    """Owns at most one live client; opens it lazily and reopens it after loss.

    Connection failures are reported to the caller and never retried here.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        connect_timeout: float = 10.0,
        client_factory: ClientFactory = AsyncWebsocketClient,
    ) -> None:
        self.endpoint = endpoint
        self.connect_timeout = connect_timeout
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None and self._client.is_open()

    async def get_client(self) -> Any:
        async with self._lock:
            if self.is_connected:
                return self._client
            client = self._client_factory(self.endpoint)
            try:
                await asyncio.wait_for(client.open(), timeout=self.connect_timeout)
            except asyncio.TimeoutError as exc:
                logger.error("连接账本节点 %s 超时", self.endpoint)
                raise LedgerConnectionError(f"timed out connecting to {self.endpoint}") from exc
            except Exception as exc:  # pylint: disable=broad-except
                logger.error("连接账本节点 %s 失败: %s", self.endpoint, exc)
                raise LedgerConnectionError(f"cannot connect to {self.endpoint}: {exc}") from exc
            self._client = client
            logger.info("已连接账本节点 %s", self.endpoint)
            return client

    async def close(self) -> None:
        async with self._lock:
            client, self._client = self._client, None
            if client is not None and client.is_open():
                await client.close()
                logger.info("已断开账本节点 %s", self.endpoint)


__all__ = ["LedgerConnectionManager", "ClientFactory"]
