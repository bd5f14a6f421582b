import asyncio

import pytest


_ENV_VARS = (
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "MENU_STORE",
    "MENU_TABLE",
    "MENU_API_URL",
    "MENU_SERVICE_URL",
    "DATABASE_URL",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_CONNECT_TIMEOUT_SECONDS",
)


def run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def mappings(self):
        return self

    def all(self):
        return list(self._rows)


class FakeSession:
    def __init__(self, rows=None, error=None):
        self._rows = rows or []
        self._error = error
        self.statements = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def execute(self, statement):
        self.statements.append(statement)
        if self._error is not None:
            raise self._error
        return FakeResult(self._rows)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
