"""Exception types and handlers that render failures as envelopes."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shopcart_api.api.models import ApiResponse, error, fail
from shopcart_api.logging_utils import create_logger

MALFORMED_BODY_MESSAGE = "請求資料格式錯誤"
INTERNAL_ERROR_MESSAGE = "伺服器內部錯誤"

logger = create_logger("errors")


class MalformedBodyError(Exception):
    """Raised when a request body cannot be decoded."""


def _envelope_response(
    status_code: int, envelope: ApiResponse, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json"),
        headers=headers,
    )


async def _handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    builder = error if exc.status_code >= 500 else fail
    return _envelope_response(exc.status_code, builder(message), exc.headers)


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _envelope_response(
        status.HTTP_400_BAD_REQUEST,
        fail(MALFORMED_BODY_MESSAGE, data=jsonable_errors(exc)),
    )


async def _handle_malformed_body(
    request: Request, exc: MalformedBodyError
) -> JSONResponse:
    logger.info("malformed_body", path=request.url.path, reason=str(exc))
    return _envelope_response(
        status.HTTP_400_BAD_REQUEST, fail(MALFORMED_BODY_MESSAGE)
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    return _envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, error(INTERNAL_ERROR_MESSAGE)
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, object]]:
    """Reduce validation errors to their location and message."""
    return [
        {"loc": list(item.get("loc", ())), "msg": item.get("msg", "")}
        for item in exc.errors()
    ]


def register_error_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering exception handlers on ``app``."""

    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
    app.add_exception_handler(MalformedBodyError, _handle_malformed_body)
    app.add_exception_handler(Exception, _handle_unexpected)


__all__ = [
    "INTERNAL_ERROR_MESSAGE",
    "MALFORMED_BODY_MESSAGE",
    "MalformedBodyError",
    "register_error_handlers",
]
