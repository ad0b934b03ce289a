"""In-process stand-ins for a ledger node and the xrpl-py submission helpers."""

from __future__ import annotations

import asyncio
from typing import Any

TX_HASH = "E3FE6EA3D48F0C2B639448020EA4F03D4F4F8FFDB243A852A0F59177921B4879"


class FakeResponse:
    def __init__(self, result: dict, ok: bool = True) -> None:
        self.result = result
        self._ok = ok

    def is_successful(self) -> bool:
        return self._ok


class FakeLedger:
    """Account-lines answers keyed by account, shared by every client it hands out."""

    def __init__(self) -> None:
        self.lines: dict[str, list[dict]] = {}
        self.pages: dict[str, list[list[dict]]] = {}
        self.errors: dict[str, dict] = {}
        self.requests: list[Any] = []
        self.clients: list["FakeClient"] = []
        self.fail_open = False

    def client_factory(self, url: str) -> "FakeClient":
        client = FakeClient(self, url)
        self.clients.append(client)
        return client

    def add_trustline(self, account: str, issuer: str, currency: str = "KFD", limit: str = "1000000") -> dict:
        line = {
            "account": issuer,
            "balance": "0",
            "currency": currency,
            "limit": limit,
            "limit_peer": "0",
            "quality_in": 0,
            "quality_out": 0,
        }
        self.lines.setdefault(account, []).append(line)
        return line


class FakeClient:
    def __init__(self, ledger: FakeLedger, url: str) -> None:
        self.ledger = ledger
        self.url = url
        self._open = False

    async def open(self) -> None:
        if self.ledger.fail_open:
            raise OSError("connection refused")
        self._open = True

    def is_open(self) -> bool:
        return self._open

    async def close(self) -> None:
        self._open = False

    async def request(self, request: Any) -> FakeResponse:
        self.ledger.requests.append(request)
        account = request.account
        if account in self.ledger.errors:
            return FakeResponse(self.ledger.errors[account], ok=False)
        pages = self.ledger.pages.get(account)
        if pages:
            index = int(request.marker or 0)
            result: dict[str, Any] = {"account": account, "lines": pages[index]}
            if index + 1 < len(pages):
                result["marker"] = str(index + 1)
            return FakeResponse(result)
        return FakeResponse({"account": account, "lines": list(self.ledger.lines.get(account, []))})


class FakeSubmission:
    """Replaces autofill/sign/submit_and_wait; outcomes are consumed in order."""

    def __init__(self) -> None:
        self.outcomes: list[Any] = []
        self.submitted: list[Any] = []
        self.delay = 0.0
        self.active = 0
        self.max_active = 0

    def succeed(self, tx_hash: str = TX_HASH, ledger_index: int = 81234) -> None:
        self.outcomes.append(
            {
                "hash": tx_hash,
                "ledger_index": ledger_index,
                "validated": True,
                "meta": {"TransactionResult": "tesSUCCESS"},
            }
        )

    def fail_with(self, outcome: Any) -> None:
        self.outcomes.append(outcome)

    async def autofill(self, transaction: Any, client: Any) -> Any:
        return transaction

    def sign(self, transaction: Any, wallet: Any) -> Any:
        return transaction

    async def submit_and_wait(self, transaction: Any, client: Any) -> FakeResponse:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            self.submitted.append(transaction)
            outcome = self.outcomes.pop(0) if self.outcomes else None
            if outcome is None:
                index = len(self.submitted)
                outcome = {
                    "hash": f"{index:064X}",
                    "ledger_index": 80000 + index,
                    "validated": True,
                    "meta": {"TransactionResult": "tesSUCCESS"},
                }
            if isinstance(outcome, BaseException):
                raise outcome
            return FakeResponse(outcome)
        finally:
            self.active -= 1


def run(coro):
    return asyncio.run(coro)
