"""Shopping-cart API package wiring and entrypoints."""

from shopcart_api.main import run_dev, run_prod
from shopcart_api.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
