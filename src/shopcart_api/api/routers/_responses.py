"""Documented responses shared by the route definitions."""

from __future__ import annotations

from typing import Any

from shopcart_api.api.models import ApiResponse

UNAUTHORIZED_DESCRIPTION = "未授權或身份驗證失敗"


def documented_responses(**descriptions: str) -> dict[int | str, dict[str, Any]]:
    """Map ``status_<code>=description`` keywords to OpenAPI response entries."""

    return {
        int(key.removeprefix("status_")): {
            "model": ApiResponse,
            "description": description,
        }
        for key, description in descriptions.items()
    }
