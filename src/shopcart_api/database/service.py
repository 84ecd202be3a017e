"""Database connection pool management."""

from __future__ import annotations

from sqlalchemy import Engine, create_engine

from shopcart_api.settings import BackendSettings, get_settings


class DatabaseService:
    """Wraps a pooled SQLAlchemy engine.

    Creating the engine does not open a connection; the pool is filled
    lazily on first checkout.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._engine = create_engine(
            url or config.database_url,
            pool_size=config.database_pool_size,
            pool_pre_ping=True,
        )

    @property
    def engine(self) -> Engine:
        """Expose the SQLAlchemy engine."""

        return self._engine

    def dispose(self) -> None:
        """Close every pooled connection."""

        self._engine.dispose()
