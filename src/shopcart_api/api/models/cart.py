"""Pydantic models for cart endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CartItemUpdateRequest(BaseModel):
    """New quantity for an item already in the cart."""

    model_config = ConfigDict(extra="allow")

    quantity: str | None = Field(default=None, description="數量", examples=["3"])


class CartItemAddRequest(CartItemUpdateRequest):
    """Product and quantity to put into the cart."""

    product_id: str | None = Field(
        default=None, alias="productId", description="產品 ID", examples=["123"]
    )
