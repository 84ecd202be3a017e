"""User management endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from shopcart_api.api.dependencies import documented_body, parse_body, require_access
from shopcart_api.api.models import (
    ApiResponse,
    LoginRequest,
    RegisterRequest,
    UserUpdateRequest,
    success,
)
from shopcart_api.api.routers._responses import documented_responses

router = APIRouter(prefix="/api/users", tags=["使用者管理"])

UserId = Annotated[str, Path(description="使用者 ID", examples=["1"])]


@router.get(
    "",
    response_model=ApiResponse,
    summary="獲取所有使用者",
    description="獲取系統中所有使用者的資訊",
    response_description="成功獲取所有使用者",
)
@router.get("/", response_model=ApiResponse, include_in_schema=False)
def list_users() -> ApiResponse:
    return success([], "已 獲取所有使用者")


@router.get(
    "/search",
    response_model=ApiResponse,
    summary="搜尋使用者",
    description="根據關鍵字搜尋使用者",
    response_description="搜尋成功",
)
def search_users(
    q: str | None = Query(default=None, description="搜尋關鍵字", examples=["user"]),
) -> ApiResponse:
    return success({"q": q}, "搜尋使用者成功")


@router.post(
    "/login",
    response_model=ApiResponse,
    summary="使用者登入",
    description="使用帳號密碼登入",
    response_description="登入成功",
    openapi_extra=documented_body(LoginRequest),
)
def login(payload: LoginRequest = Depends(parse_body(LoginRequest))) -> ApiResponse:
    return success("token", f"使用者{payload.account or ''}登入成功")


@router.post(
    "/logout",
    response_model=ApiResponse,
    summary="使用者登出",
    description="登出目前的使用者",
    response_description="登出成功",
    dependencies=[Depends(require_access)],
)
def logout() -> ApiResponse:
    return success("token", "使用者登出成功")


@router.post(
    "/status",
    response_model=ApiResponse,
    summary="檢查使用者登入狀態",
    description="檢查目前的登入狀態",
    response_description="檢查登入狀態成功",
    dependencies=[Depends(require_access)],
)
def check_status() -> ApiResponse:
    return success("token", "檢查登入狀態成功")


@router.get(
    "/{id}",
    response_model=ApiResponse,
    summary="獲取特定使用者",
    description="根據 ID 獲取特定使用者的資訊",
    response_description="成功獲取使用者資訊",
)
def get_user(id: UserId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, f"已 獲取 {id} 的使用者")


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="註冊使用者",
    description="建立一個新的使用者帳號",
    response_description="註冊成功",
    responses=documented_responses(status_400="註冊資料不完整"),
    openapi_extra=documented_body(RegisterRequest),
    dependencies=[Depends(parse_body(RegisterRequest))],
)
@router.post(
    "/",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
    dependencies=[Depends(parse_body(RegisterRequest))],
)
def register_user() -> ApiResponse:
    return success({}, "註冊使用者成功")


@router.put(
    "/{id}",
    response_model=ApiResponse,
    summary="更新使用者",
    description="更新特定使用者的資訊",
    response_description="使用者更新成功",
    responses=documented_responses(status_400="更新失敗或參數錯誤"),
    openapi_extra=documented_body(UserUpdateRequest),
    dependencies=[Depends(parse_body(UserUpdateRequest))],
)
def update_user(id: UserId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "更新使用者成功")


@router.delete(
    "/{id}",
    response_model=ApiResponse,
    summary="刪除使用者",
    description="刪除特定使用者",
    response_description="使用者刪除成功",
)
def delete_user(id: UserId) -> ApiResponse:  # noqa: A002
    return success({"id": id}, "刪除使用者成功")
