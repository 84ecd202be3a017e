"""API layer: application factory, routers, models and services."""

from shopcart_api.api.app import create_api

__all__ = ["create_api"]
