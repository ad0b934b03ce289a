"""REST client for the Xumm / Xaman payload API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .base import SigningPayload, SigningPayloadStatus, SigningServiceError

logger = logging.getLogger(__name__)


class XummSigningService:
    enabled = True

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = "https://xumm.app/api/v1/platform",
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "X-API-Key": api_key,
                "X-API-Secret": api_secret,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )

    async def create_payload(self, tx_json: dict[str, Any], *, instruction: Optional[str] = None) -> SigningPayload:
        body: dict[str, Any] = {"txjson": tx_json}
        if instruction:
            body["custom_meta"] = {"instruction": instruction}
        data = await self._call("POST", "/payload", json=body)
        uuid = data.get("uuid")
        if not uuid:
            raise SigningServiceError("签名服务未返回 payload uuid")
        return SigningPayload(
            id=uuid,
            link=(data.get("next") or {}).get("always"),
            qr=(data.get("refs") or {}).get("qr_png"),
        )

    async def get_payload_status(self, payload_id: str) -> SigningPayloadStatus:
        data = await self._call("GET", f"/payload/{payload_id}")
        meta = data.get("meta") or {}
        response = data.get("response") or {}
        return SigningPayloadStatus(
            signed=bool(meta.get("signed")),
            expired=bool(meta.get("expired")),
            account=response.get("account") or None,
            txid=response.get("txid") or None,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _call(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as exc:
            logger.error("签名服务 %s %s 返回 %s", method, path, exc.response.status_code)
            raise SigningServiceError(f"signing service returned HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("签名服务 %s %s 调用失败: %s", method, path, exc)
            raise SigningServiceError(f"signing service request failed: {exc}") from exc
        if not isinstance(data, dict):
            raise SigningServiceError("signing service returned an unexpected body")
        return data


__all__ = ["XummSigningService"]
