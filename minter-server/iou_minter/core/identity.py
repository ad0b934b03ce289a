"""Issuing identity loading and the startup consistency check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from xrpl.constants import XRPLException
from xrpl.wallet import Wallet


@dataclass(slots=True, frozen=True)
class IssuingIdentity:
    address: str
    wallet: Wallet = field(repr=False, compare=False)


@dataclass(slots=True, frozen=True)
class IdentityCheck:
    identity: Optional[IssuingIdentity] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.identity is not None and self.error is None


def load_issuing_identity(secret: Optional[str], address: Optional[str]) -> IdentityCheck:
    """Derive the wallet from ``secret`` and confirm it controls ``address``."""
    if not secret or not address:
        return IdentityCheck(error="ISSUER__SECRET 或 ISSUER__ADDRESS 未设置")
    try:
        wallet = Wallet.from_seed(secret)
    except (XRPLException, ValueError, TypeError) as exc:
        return IdentityCheck(error=f"ISSUER__SECRET 无法解析: {exc}")
    derived = wallet.classic_address
    if derived != address:
        return IdentityCheck(error=f"ISSUER__ADDRESS({address}) 与 ISSUER__SECRET 推导地址({derived}) 不一致")
    return IdentityCheck(identity=IssuingIdentity(address=derived, wallet=wallet))


__all__ = ["IssuingIdentity", "IdentityCheck", "load_issuing_identity"]
