"""Pydantic models for product endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductPayload(BaseModel):
    """Product fields submitted when creating or updating a product."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="產品名稱", examples=["iPhone 13"])
    price: str | None = Field(default=None, description="產品價格", examples=["25000"])
    description: str | None = Field(
        default=None,
        description="產品描述",
        examples=["最新款 iPhone 13，搭載 A15 仿生晶片"],
    )
    image: str | None = Field(
        default=None,
        description="產品圖片 URL",
        examples=["https://via.placeholder.com/150"],
    )
