"""Shopping cart endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from shopcart_api.api.dependencies import (
    documented_body,
    parse_body,
    read_bearer_token,
)
from shopcart_api.api.models import (
    ApiResponse,
    CartItemAddRequest,
    CartItemUpdateRequest,
    success,
)
from shopcart_api.api.routers._responses import (
    UNAUTHORIZED_DESCRIPTION,
    documented_responses,
)

# Every cart operation advertises bearer auth; the token is read, not checked.
router = APIRouter(
    prefix="/api/cart",
    tags=["購物車管理"],
    dependencies=[Depends(read_bearer_token)],
    responses=documented_responses(status_401=UNAUTHORIZED_DESCRIPTION),
)

CartItemId = Annotated[str, Path(description="購物車項目 ID", examples=["cart123"])]


@router.get(
    "",
    response_model=ApiResponse,
    summary="獲取購物車內容",
    description="獲取當前使用者的購物車內容",
    response_description="成功獲取購物車內容",
)
@router.get("/", response_model=ApiResponse, include_in_schema=False)
def get_cart() -> ApiResponse:
    return success([], "已獲取購物車內容")


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="新增商品到購物車",
    description="將商品新增到使用者的購物車中",
    response_description="商品新增到購物車成功",
    responses=documented_responses(status_400="新增資料不完整"),
    openapi_extra=documented_body(CartItemAddRequest),
    dependencies=[Depends(parse_body(CartItemAddRequest))],
)
@router.post(
    "/",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
    dependencies=[Depends(parse_body(CartItemAddRequest))],
)
def add_cart_item() -> ApiResponse:
    return success({}, "商品新增到購物車成功")


# Registered ahead of ``/{id}`` so "clear" is never taken for an item id.
@router.delete(
    "/clear",
    response_model=ApiResponse,
    summary="清空購物車",
    description="清空使用者的整個購物車",
    response_description="購物車清空成功",
)
def clear_cart() -> ApiResponse:
    return success({}, "購物車清空成功")


@router.put(
    "/{id}",
    response_model=ApiResponse,
    summary="更新購物車商品數量",
    description="更新購物車中特定商品的數量",
    response_description="購物車商品數量更新成功",
    responses=documented_responses(status_400="更新失敗或參數錯誤"),
    openapi_extra=documented_body(CartItemUpdateRequest),
    dependencies=[Depends(parse_body(CartItemUpdateRequest))],
)
def update_cart_item(id: CartItemId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "購物車商品數量更新成功")


@router.delete(
    "/{id}",
    response_model=ApiResponse,
    summary="從購物車移除商品",
    description="從購物車中移除特定商品",
    response_description="商品從購物車移除成功",
)
def remove_cart_item(id: CartItemId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "商品從購物車移除成功")
