"""Models used for API request and response payloads."""

from shopcart_api.api.models.auth import (
    LoginRequest,
    RegisterRequest,
    User,
    UserUpdateRequest,
)
from shopcart_api.api.models.cart import CartItemAddRequest, CartItemUpdateRequest
from shopcart_api.api.models.envelope import ApiResponse, error, fail, success
from shopcart_api.api.models.product import ProductPayload

__all__ = [
    "ApiResponse",
    "CartItemAddRequest",
    "CartItemUpdateRequest",
    "LoginRequest",
    "ProductPayload",
    "RegisterRequest",
    "User",
    "UserUpdateRequest",
    "error",
    "fail",
    "success",
]
