"""Shared models and cross-cutting helpers for the backend."""

from shopcart_api.shared.enums import ResponseStatus

__all__ = ["ResponseStatus"]
