"""Authorization policies consulted by guarded endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

PASS_THROUGH_REASON = "pass-through"
DEFAULT_DENIAL_REASON = "未授權或身份驗證失敗"


@dataclass(slots=True, frozen=True)
class AccessContext:
    """Request facts an access policy can base its decision on."""

    method: str
    path: str
    token: str | None = None


@dataclass(slots=True, frozen=True)
class AccessDecision:
    """Outcome of an access check."""

    allowed: bool
    reason: str

    @classmethod
    def allow(cls, reason: str = PASS_THROUGH_REASON) -> AccessDecision:
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: str = DEFAULT_DENIAL_REASON) -> AccessDecision:
        return cls(allowed=False, reason=reason)


class AccessPolicy(Protocol):
    """Decides whether a request may reach a guarded endpoint."""

    def check(self, context: AccessContext) -> AccessDecision: ...


class AllowAllPolicy:
    """Lets every request through without looking at credentials."""

    def check(self, context: AccessContext) -> AccessDecision:
        return AccessDecision.allow()


class DenyAllPolicy:
    """Rejects every request with a fixed reason."""

    def __init__(self, reason: str = DEFAULT_DENIAL_REASON) -> None:
        self._reason = reason

    def check(self, context: AccessContext) -> AccessDecision:
        return AccessDecision.deny(self._reason)
