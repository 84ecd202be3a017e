"""Route definitions for public HTTP endpoints."""

from shopcart_api.api.routers.cart import router as cart_router
from shopcart_api.api.routers.docs import router as docs_router
from shopcart_api.api.routers.products import router as products_router
from shopcart_api.api.routers.users import router as users_router

__all__ = ["cart_router", "docs_router", "products_router", "users_router"]
