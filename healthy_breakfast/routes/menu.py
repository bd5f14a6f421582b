"""Menu API routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from healthy_breakfast.services.menu_store import DataUnavailable, MenuStore, build_menu_store

router = APIRouter(prefix="/api", tags=["menu"])

logger = logging.getLogger(__name__)

_menu_store: MenuStore = build_menu_store()

_DATABASE_ERROR_BODY = {"error": "Database error"}


def get_menu_store() -> MenuStore:
    return _menu_store


@router.get("", response_class=PlainTextResponse, name="hello")
async def hello() -> str:
    return "Hello from Backend"


@router.get("/menu", name="list_menu")
async def list_menu(menu_store: MenuStore = Depends(get_menu_store)) -> JSONResponse:
    """Return every menu item the store knows about."""

    try:
        items = await menu_store.list_items()
    except DataUnavailable as exc:
        logger.error("Error fetching menu: %s (cause: %r)", exc, exc.__cause__)
        return JSONResponse(status_code=500, content=_DATABASE_ERROR_BODY)
    return JSONResponse(jsonable_encoder(items))
