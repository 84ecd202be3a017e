from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from shopcart_api.api.docs import OPENAPI_PATH

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


@pytest.fixture
def schema(client: TestClient) -> dict[str, Any]:
    response = client.get(OPENAPI_PATH)
    assert response.status_code == 200
    return response.json()


def test_welcome_page_links_to_docs(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text == "首頁 - 查看 API 文檔請前往 <a href='/api-docs'>/api-docs</a>"


def test_swagger_ui_is_served(client: TestClient) -> None:
    response = client.get("/api-docs")

    assert response.status_code == 200
    assert "<title>購物車 API 文檔</title>" in response.text
    assert "swagger-ui" in response.text
    assert OPENAPI_PATH in response.text
    assert ".swagger-ui .topbar { display: none }" in response.text


def test_schema_info_block(schema: dict[str, Any]) -> None:
    info = schema["info"]

    assert schema["openapi"].startswith("3.")
    assert info["title"] == "購物車 RESTful API"
    assert info["version"] == "1.0.0"
    assert info["contact"] == {"name": "API 支援", "email": "support@example.com"}
    assert info["license"]["name"] == "MIT"
    assert schema["servers"] == [
        {"url": "http://localhost:3005", "description": "開發環境"}
    ]


def test_schema_declares_bearer_security(schema: dict[str, Any]) -> None:
    bearer = schema["components"]["securitySchemes"]["bearerAuth"]

    assert bearer["type"] == "http"
    assert bearer["scheme"] == "bearer"
    assert bearer["bearerFormat"] == "JWT"
    assert schema["paths"]["/api/pts/logout"]["post"]["security"] == [
        {"bearerAuth": []}
    ]
    assert "security" not in schema["paths"]["/api/pts/login"]["post"]


def test_schema_lists_every_route(schema: dict[str, Any]) -> None:
    paths = schema["paths"]
    operations = {
        (method.upper(), path) for path, item in paths.items() for method in item
    }

    assert {
        ("GET", "/api/users"),
        ("GET", "/api/pts"),
        ("POST", "/api/pts"),
        ("GET", "/api/pts/search"),
        ("GET", "/api/pts/{id}"),
        ("PUT", "/api/pts/{id}"),
        ("DELETE", "/api/pts/{id}"),
        ("POST", "/api/pts/login"),
        ("POST", "/api/pts/logout"),
        ("POST", "/api/pts/status"),
        ("GET", "/api/cart"),
        ("POST", "/api/cart"),
        ("PUT", "/api/cart/{id}"),
        ("DELETE", "/api/cart/{id}"),
        ("DELETE", "/api/cart/clear"),
    } <= operations
    assert "/" not in paths
    assert "/api-docs" not in paths


def test_schema_documents_request_bodies(schema: dict[str, Any]) -> None:
    body = schema["paths"]["/api/cart"]["post"]["requestBody"]

    assert set(body["content"]) == {
        "application/json",
        "application/x-www-form-urlencoded",
    }
    properties = body["content"]["application/json"]["schema"]["properties"]
    assert {"productId", "quantity"} <= set(properties)


def test_schema_documents_error_responses(schema: dict[str, Any]) -> None:
    responses = schema["paths"]["/api/pts"]["post"]["responses"]

    assert set(responses) >= {"201", "400"}


def test_schema_publishes_named_components(schema: dict[str, Any]) -> None:
    components = schema["components"]["schemas"]

    assert {"ApiResponse", "User", "LoginRequest", "RegisterRequest"} <= set(components)
    assert components["ApiResponse"]["properties"]["status"]


CART_OPERATIONS = [
    ("/api/cart", "get"),
    ("/api/cart", "post"),
    ("/api/cart/{id}", "put"),
    ("/api/cart/{id}", "delete"),
    ("/api/cart/clear", "delete"),
]


@pytest.mark.parametrize(("path", "method"), CART_OPERATIONS)
def test_cart_operations_declare_bearer_auth(
    schema: dict[str, Any], path: str, method: str
) -> None:
    operation = schema["paths"][path][method]

    assert operation["security"] == [{"bearerAuth": []}]
    assert operation["tags"] == ["購物車管理"]
    assert "401" in operation["responses"]


def test_cart_bearer_auth_is_not_enforced(client: TestClient) -> None:
    assert client.get("/api/cart").status_code == 200
    assert (
        client.delete(
            "/api/cart/clear", headers={"Authorization": "Bearer whatever"}
        ).status_code
        == 200
    )


@pytest.mark.parametrize("path", ["/api/pts/login", "/api/pts/logout", "/api/pts/status"])
def test_product_account_operations_document_only_success(
    schema: dict[str, Any], path: str
) -> None:
    responses = schema["paths"][path]["post"]["responses"]

    assert "400" not in responses
    assert "401" not in responses


def test_item_paths_use_id_parameter(schema: dict[str, Any]) -> None:
    parameters = schema["paths"]["/api/pts/{id}"]["get"]["parameters"]

    assert [(p["name"], p["in"]) for p in parameters] == [("id", "path")]


def test_trailing_slash_aliases_are_not_documented(schema: dict[str, Any]) -> None:
    assert not {"/api/pts/", "/api/cart/", "/api/users/"} & set(schema["paths"])
