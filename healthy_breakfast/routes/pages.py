"""HTML pages served alongside the API."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from healthy_breakfast.config import settings

router = APIRouter(include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


@router.get("/", name="home")
async def home(request: Request):
    """Render the menu page; the list itself is loaded client-side."""
    return templates.TemplateResponse(
        request,
        "home.html",
        {
            "title": "Healthy Breakfast Menu",
            "menu_api_url": settings.menu_api_url,
        },
    )
