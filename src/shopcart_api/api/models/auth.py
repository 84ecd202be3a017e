"""Pydantic models for account endpoints.

Request fields are opaque text: every field is optional and nothing is
checked beyond being parsed out of the body.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Credentials submitted to a login endpoint."""

    model_config = ConfigDict(extra="allow")

    account: str | None = Field(
        default=None, description="使用者帳號", examples=["user123"]
    )
    password: str | None = Field(
        default=None, description="使用者密碼", examples=["password123"]
    )


class RegisterRequest(LoginRequest):
    """Payload for registering a new user."""

    mail: str | None = Field(
        default=None, description="使用者信箱", examples=["user@example.com"]
    )


class UserUpdateRequest(BaseModel):
    """Profile fields that may be changed on an existing user."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="使用者姓名", examples=["張三"])
    mail: str | None = Field(
        default=None, description="使用者信箱", examples=["user@example.com"]
    )
    head: str | None = Field(
        default=None,
        description="使用者頭像 URL",
        examples=["https://randomuser.me/api/portraits/men/1.jpg"],
    )


class User(BaseModel):
    """Public representation of a user, published in the API documentation."""

    id: int = Field(description="使用者 ID")
    account: str = Field(description="使用者帳號", examples=["user123"])
    name: str = Field(description="使用者姓名", examples=["張三"])
    mail: str = Field(description="使用者信箱", examples=["user@example.com"])
    head: str = Field(
        description="使用者頭像 URL",
        examples=["https://randomuser.me/api/portraits/men/1.jpg"],
    )
