"""Menu stores with in-memory and Postgres backends."""

from __future__ import annotations

import logging
from typing import Any, Final, List, Protocol, Sequence, Tuple

from sqlalchemy import literal_column, select, table
from sqlalchemy.ext.asyncio import AsyncEngine

from healthy_breakfast.config import Settings, settings as default_settings
from healthy_breakfast.db import create_engine, create_session_factory
from healthy_breakfast.schemas import MenuItem

logger = logging.getLogger(__name__)


BREAKFAST_MENU: Final[Tuple[MenuItem, ...]] = (
    MenuItem(id=1, name="Oats Porridge", price=45),
    MenuItem(id=2, name="Vegetable Upma", price=50),
    MenuItem(id=3, name="Sprouts Salad", price=60),
)


class DataUnavailable(Exception):
    """Raised when the menu cannot be read from its backing database."""


class MenuStore(Protocol):
    """Anything that can list the full menu."""

    async def list_items(self) -> List[dict[str, Any]]: ...

    async def close(self) -> None: ...


class InMemoryMenuStore:
    """Serve a fixed menu held in process memory."""

    def __init__(self, items: Sequence[MenuItem] = BREAKFAST_MENU) -> None:
        self._items: Tuple[MenuItem, ...] = tuple(items)

    async def list_items(self) -> List[dict[str, Any]]:
        return [item.model_dump() for item in self._items]

    async def close(self) -> None:
        return None


class DatabaseMenuStore:
    """Read menu rows from a table via SQLAlchemy.

    Rows are returned as dictionaries keyed by the table's own column names,
    in table scan order. Any failure while connecting or querying surfaces as
    :class:`DataUnavailable`.
    """

    def __init__(
        self,
        session_factory,
        *,
        table_name: str = "menu_items",
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._table_name = table_name
        self._engine = engine

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        table_name: str = "menu_items",
        connect_timeout: float | None = None,
    ) -> "DatabaseMenuStore":
        engine = create_engine(url, connect_timeout=connect_timeout)
        return cls(create_session_factory(engine), table_name=table_name, engine=engine)

    @property
    def table_name(self) -> str:
        return self._table_name

    async def list_items(self) -> List[dict[str, Any]]:
        statement = select(literal_column("*")).select_from(table(self._table_name))
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                rows = result.mappings().all()
        except Exception as exc:
            raise DataUnavailable(f"Unable to read menu from {self._table_name!r}") from exc
        return [dict(row) for row in rows]

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()


def build_menu_store(config: Settings | None = None) -> MenuStore:
    """Return the store selected by configuration."""

    config = config or default_settings
    backend = config.resolved_menu_store
    if backend == "memory":
        logger.info("Serving menu from memory (%d items)", len(BREAKFAST_MENU))
        return InMemoryMenuStore()

    database_url = config.resolved_database_url
    if not database_url:
        raise RuntimeError(
            "MENU_STORE=database requires DATABASE_URL or DB_HOST to be configured."
        )
    logger.info("Serving menu from database table %s", config.menu_table)
    return DatabaseMenuStore.from_url(
        database_url,
        table_name=config.menu_table,
        connect_timeout=config.db_connect_timeout_seconds,
    )
