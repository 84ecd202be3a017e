"""Welcome page and interactive API documentation."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from shopcart_api.api.docs import DOCS_PATH, OPENAPI_PATH

router = APIRouter(include_in_schema=False)

WELCOME_HTML = f"首頁 - 查看 API 文檔請前往 <a href='{DOCS_PATH}'>{DOCS_PATH}</a>"
HIDE_TOPBAR_CSS = "<style>.swagger-ui .topbar { display: none }</style>"


@router.get("/", response_class=HTMLResponse)
def welcome() -> str:
    return WELCOME_HTML


@router.get(DOCS_PATH, response_class=HTMLResponse)
def swagger_ui(request: Request) -> HTMLResponse:
    """Serve Swagger UI pointed at the generated schema."""
    page = get_swagger_ui_html(
        openapi_url=OPENAPI_PATH,
        title=request.app.state.settings.docs_title,
    )
    html = page.body.decode("utf-8").replace("</head>", f"{HIDE_TOPBAR_CSS}</head>", 1)
    return HTMLResponse(html)
