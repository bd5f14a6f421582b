"""Database utilities for async SQLAlchemy access."""

from __future__ import annotations

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def _ensure_async_driver(raw_url: str) -> str:
    """Return a SQLAlchemy URL string using an async driver when possible."""

    url = make_url(raw_url)
    backend = url.get_backend_name()
    drivername = url.drivername

    if backend in {"postgresql", "postgres"} and "+asyncpg" not in drivername:
        drivername = "postgresql+asyncpg"
        url = url.set(drivername=drivername)

    return url.render_as_string(hide_password=False)


def create_engine(raw_url: str, *, connect_timeout: float | None = None) -> AsyncEngine:
    """Build an async engine for ``raw_url``.

    ``connect_timeout`` bounds how long asyncpg waits for a connection so an
    unreachable host fails the query instead of stalling the request.
    """

    normalised_url = _ensure_async_driver(raw_url)
    connect_args: dict[str, float] = {}
    if connect_timeout is not None and make_url(normalised_url).drivername.endswith("+asyncpg"):
        connect_args["timeout"] = connect_timeout
    return create_async_engine(normalised_url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a session factory bound to ``engine``."""

    return async_sessionmaker(engine, expire_on_commit=False)
