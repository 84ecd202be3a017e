"""Product management endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from shopcart_api.api.dependencies import documented_body, parse_body, require_access
from shopcart_api.api.models import ApiResponse, LoginRequest, ProductPayload, success
from shopcart_api.api.routers._responses import documented_responses

router = APIRouter(prefix="/api/pts", tags=["產品管理"])

ProductId = Annotated[str, Path(description="產品 ID", examples=["123"])]


@router.get(
    "",
    response_model=ApiResponse,
    summary="獲取所有產品",
    description="獲取系統中所有產品的資訊",
    response_description="成功獲取所有產品",
)
@router.get("/", response_model=ApiResponse, include_in_schema=False)
def list_products() -> ApiResponse:
    return success([], "已 獲取所有產品")


@router.get(
    "/search",
    response_model=ApiResponse,
    summary="搜尋產品",
    description="根據關鍵字搜尋產品",
    response_description="搜尋成功",
)
def search_products(
    key: str | None = Query(default=None, description="搜尋關鍵字", examples=["手機"]),
) -> ApiResponse:
    return success({"key": key}, "搜尋產品成功")


@router.post(
    "/login",
    response_model=ApiResponse,
    summary="產品管理登入",
    description="使用帳號密碼登入產品管理系統",
    response_description="登入成功",
    openapi_extra=documented_body(LoginRequest),
)
def login(payload: LoginRequest = Depends(parse_body(LoginRequest))) -> ApiResponse:
    """Pretend to log in; the token is a fixed placeholder."""
    return success("token", f"使用者{payload.account or ''}登入成功")


@router.post(
    "/logout",
    response_model=ApiResponse,
    summary="產品管理登出",
    description="登出產品管理系統",
    response_description="登出成功",
    dependencies=[Depends(require_access)],
)
def logout() -> ApiResponse:
    return success("token", "使用者登出成功")


@router.post(
    "/status",
    response_model=ApiResponse,
    summary="檢查產品管理登入狀態",
    description="檢查目前的登入狀態",
    response_description="檢查登入狀態成功",
    dependencies=[Depends(require_access)],
)
def check_status() -> ApiResponse:
    return success("token", "檢查登入狀態成功")


@router.get(
    "/{id}",
    response_model=ApiResponse,
    summary="獲取特定產品",
    description="根據 ID 獲取特定產品的詳細資訊",
    response_description="成功獲取產品資訊",
)
def get_product(id: ProductId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, f"已 獲取 {id} 的產品")


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="新增產品",
    description="新增一個產品到系統",
    response_description="產品新增成功",
    responses=documented_responses(status_400="新增資料不完整或價格無效"),
    openapi_extra=documented_body(ProductPayload),
    dependencies=[Depends(parse_body(ProductPayload))],
)
@router.post(
    "/",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
    dependencies=[Depends(parse_body(ProductPayload))],
)
def create_product() -> ApiResponse:
    return success({}, "新增一個產品成功")


@router.put(
    "/{id}",
    response_model=ApiResponse,
    summary="更新產品",
    description="更新特定產品的資訊",
    response_description="產品更新成功",
    responses=documented_responses(status_400="更新失敗或參數錯誤"),
    openapi_extra=documented_body(ProductPayload),
    dependencies=[Depends(parse_body(ProductPayload))],
)
def update_product(id: ProductId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "更新產品成功")


@router.delete(
    "/{id}",
    response_model=ApiResponse,
    summary="刪除產品",
    description="刪除特定產品",
    response_description="產品刪除成功",
)
def delete_product(id: ProductId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "刪除產品成功")
