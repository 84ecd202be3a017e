from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


def test_get_cart_is_empty(client: TestClient) -> None:
    response = client.get("/api/cart")

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": [],
        "message": "已獲取購物車內容",
    }


def test_add_item_returns_created(client: TestClient) -> None:
    response = client.post("/api/cart", json={"productId": 123, "quantity": 2})

    assert response.status_code == 201
    assert response.json() == {
        "status": "success",
        "data": {},
        "message": "商品新增到購物車成功",
    }


def test_add_item_accepts_form_body(client: TestClient) -> None:
    response = client.post("/api/cart", data={"productId": "123", "quantity": "x"})

    assert response.status_code == 201


def test_update_item_echoes_id(client: TestClient) -> None:
    response = client.put("/api/cart/cart123", data={"quantity": "3"})

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": {"id": "cart123"},
        "message": "購物車商品數量更新成功",
    }


def test_remove_item_echoes_id(client: TestClient) -> None:
    response = client.delete("/api/cart/cart123")

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": {"id": "cart123"},
        "message": "商品從購物車移除成功",
    }


def test_clear_cart_is_not_treated_as_item_id(client: TestClient) -> None:
    response = client.delete("/api/cart/clear")

    assert response.status_code == 200
    assert response.json() == {
        "status": "success",
        "data": {},
        "message": "購物車清空成功",
    }


def test_put_on_clear_is_an_item_update(client: TestClient) -> None:
    response = client.put("/api/cart/clear", json={"quantity": 1})

    assert response.status_code == 200
    assert response.json()["data"] == {"id": "clear"}


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/api/cart"),
        ("PUT", "/api/cart/7"),
        ("DELETE", "/api/cart/7"),
        ("DELETE", "/api/cart/clear"),
    ],
)
def test_repeated_calls_are_identical(
    client: TestClient, method: str, path: str
) -> None:
    first = client.request(method, path)
    second = client.request(method, path)

    assert first.json() == second.json()
