"""OpenAPI document generation for the shopping-cart API."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

from shopcart_api.api.models import LoginRequest, RegisterRequest, User

API_TITLE = "購物車 RESTful API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "一個完整的購物車系統 API，包含使用者管理、產品管理和購物車功能"
API_CONTACT = {"name": "API 支援", "email": "support@example.com"}
API_LICENSE = {"name": "MIT", "url": "https://opensource.org/licenses/MIT"}

DOCS_PATH = "/api-docs"
OPENAPI_PATH = f"{DOCS_PATH}/openapi.json"

# Published as named components even though no route references them directly.
COMPONENT_MODELS: tuple[type[BaseModel], ...] = (User, LoginRequest, RegisterRequest)


def build_openapi(app: FastAPI, *, server_url: str) -> Callable[[], dict[str, Any]]:
    """Return an ``app.openapi`` replacement that caches the generated schema."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            contact=app.contact,
            license_info=app.license_info,
            servers=[{"url": server_url, "description": "開發環境"}],
        )
        components = schema.setdefault("components", {}).setdefault("schemas", {})
        for model in COMPONENT_MODELS:
            components.setdefault(model.__name__, model.model_json_schema())
        app.openapi_schema = schema
        return app.openapi_schema

    return openapi
