"""Routers for the menu API and the page that renders it."""

from fastapi import APIRouter

from . import menu, pages
from .menu import get_menu_store

router = APIRouter()
router.include_router(pages.router)
router.include_router(menu.router)

__all__ = ["get_menu_store", "router"]
