"""Uniform response envelope returned by every endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from shopcart_api.shared import ResponseStatus


class ApiResponse(BaseModel):
    """Envelope wrapping the payload and a human-readable message."""

    status: ResponseStatus = Field(description="回應狀態")
    data: Any = Field(default=None, description="回應資料")
    message: str = Field(description="回應訊息")


def success(data: Any, message: str) -> ApiResponse:
    """Build a ``success`` envelope."""
    return ApiResponse(status=ResponseStatus.SUCCESS, data=data, message=message)


def fail(message: str, data: Any = None) -> ApiResponse:
    """Build a ``fail`` envelope for client-side problems."""
    return ApiResponse(status=ResponseStatus.FAIL, data=data, message=message)


def error(message: str, data: Any = None) -> ApiResponse:
    """Build an ``error`` envelope for server-side problems."""
    return ApiResponse(status=ResponseStatus.ERROR, data=data, message=message)
