"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from shopcart_api.api.errors import MalformedBodyError
from shopcart_api.api.services import (
    AccessContext,
    AccessDecision,
    AccessPolicy,
)
from shopcart_api.logging_utils import create_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

BEARER_SCHEME_NAME = "bearerAuth"

_security = HTTPBearer(
    auto_error=False,
    scheme_name=BEARER_SCHEME_NAME,
    bearerFormat="JWT",
    description="請在 Authorization header 中使用 Bearer token",
)

logger = create_logger("access")


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


async def read_body_fields(request: Request) -> dict[str, str | None]:
    """Parse a JSON or form-encoded body into a flat mapping of text values.

    Bodies with any other content type, and empty bodies, yield an empty
    mapping.
    """

    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(JSON_CONTENT_TYPE):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise MalformedBodyError("invalid JSON") from exc
        if not isinstance(payload, dict):
            raise MalformedBodyError("JSON body must be an object")
        return {str(key): _as_text(value) for key, value in payload.items()}

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}


def parse_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that reads the request body into ``model``."""

    async def dependency(request: Request) -> ModelT:
        return model.model_validate(await read_body_fields(request))

    dependency.__name__ = f"parse_{model.__name__}"
    return dependency


def documented_body(model: type[BaseModel], *, required: bool = True) -> dict[str, Any]:
    """OpenAPI ``requestBody`` fragment accepting ``model`` as JSON or form data."""

    schema = model.model_json_schema()
    return {
        "requestBody": {
            "required": required,
            "content": {
                JSON_CONTENT_TYPE: {"schema": schema},
                FORM_CONTENT_TYPES[0]: {"schema": schema},
            },
        }
    }


def get_access_policy(request: Request) -> AccessPolicy:
    """Return the access policy configured for the running application."""

    return request.app.state.access_policy


def read_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
) -> str | None:
    """Return the bearer token if one was sent; never rejects the request.

    Routes depending on this declare the bearer scheme in the generated
    documentation without enforcing it.
    """

    return credentials.credentials if credentials is not None else None


def require_access(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    policy: AccessPolicy = Depends(get_access_policy),
) -> AccessDecision:
    """Consult the access policy and reject the request when it denies."""

    context = AccessContext(
        method=request.method,
        path=request.url.path,
        token=credentials.credentials if credentials is not None else None,
    )
    decision = policy.check(context)
    if not decision.allowed:
        logger.warning(
            "access_denied",
            method=context.method,
            path=context.path,
            reason=decision.reason,
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=decision.reason,
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.debug("access_granted", path=context.path, reason=decision.reason)
    return decision


__all__ = [
    "BEARER_SCHEME_NAME",
    "documented_body",
    "get_access_policy",
    "parse_body",
    "read_bearer_token",
    "read_body_fields",
    "require_access",
]
