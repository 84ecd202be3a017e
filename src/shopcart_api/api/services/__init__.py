"""Service layer for API-specific logic."""

from shopcart_api.api.services.access import (
    AccessContext,
    AccessDecision,
    AccessPolicy,
    AllowAllPolicy,
    DenyAllPolicy,
)

__all__ = [
    "AccessContext",
    "AccessDecision",
    "AccessPolicy",
    "AllowAllPolicy",
    "DenyAllPolicy",
]
