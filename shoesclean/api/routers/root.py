# This file serves `/`: a plain-text welcome for API-only deployments,
# or the HTML admin dashboard when the app is configured with the dashboard presentation.

from __future__ import annotations

import html
import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from shoesclean.api.api_config import ApiConfig
from shoesclean.api.dependencies import get_config

router = APIRouter(tags=["dashboard"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]

WELCOME_TEXT = (
    "Welcome to the Shoesclean API! Service catalog CRUD with search, sorting, and pagination "
    "is available under /api/services."
)
_TEMPLATE_PATH = Path(__file__).resolve().parent.parent / "templates" / "dashboard.html"
_BASE_URL_PLACEHOLDER = "__API_BASE_URL__"
_TITLE_PLACEHOLDER = "__APP_TITLE__"


@lru_cache(maxsize=1)
def _dashboard_template() -> str:
    return _TEMPLATE_PATH.read_text(encoding="utf-8")


def render_dashboard(config: ApiConfig) -> str:
    """Fill the dashboard template with the configured API base URL."""

    return (
        _dashboard_template()
        .replace(_BASE_URL_PLACEHOLDER, json.dumps(config.dashboard_api_base_url))
        .replace(_TITLE_PLACEHOLDER, html.escape(config.api_name))
    )


@router.get("/", include_in_schema=False)
def index(config: ConfigDep) -> Response:
    if config.presentation == "dashboard":
        return HTMLResponse(render_dashboard(config))
    return PlainTextResponse(WELCOME_TEXT)
