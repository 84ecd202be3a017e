"""Database connectivity helpers."""

from shopcart_api.database.service import DatabaseService

__all__ = ["DatabaseService"]
