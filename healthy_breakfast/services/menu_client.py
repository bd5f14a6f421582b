"""HTTP client for the menu endpoint."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, List, Mapping

import httpx

from healthy_breakfast.config import get_settings

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₹"


def format_menu_line(item: Mapping[str, Any]) -> str:
    """Return the display line for a single menu item."""

    return f"{item.get('name')} - {CURRENCY_SYMBOL}{item.get('price')}"


def render_menu(items: Iterable[Mapping[str, Any]]) -> List[str]:
    """Return one display line per item, preserving order."""

    return [format_menu_line(item) for item in items]


class MenuClient:
    """Fetch the breakfast menu from a running backend."""

    _MENU_PATH = "/api/menu"

    def __init__(
        self,
        base_url: str = "http://localhost:8080",
        *,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_menu(self) -> List[dict[str, Any]]:
        """Return the menu, or an empty list when it cannot be loaded."""

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(self._MENU_PATH)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch menu: %s", exc)
            return []
        except ValueError as exc:
            logger.error("Menu response was not valid JSON: %s", exc)
            return []

        if not isinstance(payload, list):
            logger.error("Unexpected menu payload type: %s", type(payload).__name__)
            return []
        return payload


async def print_menu(client: MenuClient) -> None:
    """Fetch the menu once and print one line per item."""

    for line in render_menu(await client.fetch_menu()):
        print(line)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    asyncio.run(print_menu(MenuClient(settings.menu_service_url)))
