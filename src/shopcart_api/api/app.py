"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopcart_api.api.docs import (
    API_CONTACT,
    API_DESCRIPTION,
    API_LICENSE,
    API_TITLE,
    API_VERSION,
    DOCS_PATH,
    OPENAPI_PATH,
    build_openapi,
)
from shopcart_api.api.errors import register_error_handlers
from shopcart_api.api.middleware import OriginAllowListMiddleware
from shopcart_api.api.routers import (
    cart_router,
    docs_router,
    products_router,
    users_router,
)
from shopcart_api.api.services import AccessPolicy, AllowAllPolicy
from shopcart_api.database import DatabaseService
from shopcart_api.logging_utils import configure_logging, create_logger
from shopcart_api.settings import BackendSettings, get_settings

logger = create_logger("api")


def create_api(
    settings: BackendSettings | None = None,
    *,
    access_policy: AccessPolicy | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    ``settings`` defaults to the environment-derived configuration and
    ``access_policy`` to one that lets every guarded request through.
    """
    config = settings or get_settings()
    configure_logging(config.log_level, config.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.database = DatabaseService(settings=config)
        logger.info(
            "api_started",
            url=config.base_url,
            docs_url=f"{config.base_url}{DOCS_PATH}",
        )
        try:
            yield
        finally:
            app.state.database.dispose()

    app = FastAPI(
        title=API_TITLE,
        version=API_VERSION,
        description=API_DESCRIPTION,
        contact=API_CONTACT,
        license_info=API_LICENSE,
        openapi_url=OPENAPI_PATH,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.access_policy = access_policy or AllowAllPolicy()

    register_error_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Added last so it runs first and rejects before any CORS handling.
    app.add_middleware(
        OriginAllowListMiddleware, allowed_origins=config.cors_allowed_origins
    )

    app.include_router(docs_router)
    app.include_router(users_router)
    app.include_router(products_router)
    app.include_router(cart_router)
    app.openapi = build_openapi(app, server_url=config.base_url)  # type: ignore[method-assign]
    return app
