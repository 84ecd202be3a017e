from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    ("method", "path", "status_code", "message"),
    [
        ("GET", "/api/pts", 200, "已 獲取所有產品"),
        ("POST", "/api/pts", 201, "新增一個產品成功"),
        ("GET", "/api/cart", 200, "已獲取購物車內容"),
        ("POST", "/api/cart", 201, "商品新增到購物車成功"),
        ("GET", "/api/users", 200, "已 獲取所有使用者"),
        ("POST", "/api/users", 201, "註冊使用者成功"),
    ],
)
@pytest.mark.parametrize("suffix", ["", "/"])
def test_router_root_answers_without_redirect(
    client: TestClient,
    method: str,
    path: str,
    status_code: int,
    message: str,
    suffix: str,
) -> None:
    response = client.request(
        method, f"{path}{suffix}", json={}, follow_redirects=False
    )

    assert response.status_code == status_code
    assert response.json()["message"] == message


def test_trailing_slash_post_still_parses_body(client: TestClient) -> None:
    response = client.post(
        "/api/pts/",
        content=b"{broken",
        headers={"Content-Type": "application/json"},
        follow_redirects=False,
    )

    assert response.status_code == 400
    assert response.json()["status"] == "fail"
