import pytest

from conftest import FakeSession, run
from healthy_breakfast.config import Settings
from healthy_breakfast.services.menu_store import (
    BREAKFAST_MENU,
    DataUnavailable,
    DatabaseMenuStore,
    InMemoryMenuStore,
    build_menu_store,
)


def test_in_memory_store_lists_items_in_insertion_order():
    items = run(InMemoryMenuStore().list_items())
    assert [item["id"] for item in items] == [1, 2, 3]
    assert [item["name"] for item in items] == [
        "Oats Porridge",
        "Vegetable Upma",
        "Sprouts Salad",
    ]
    assert len({item["id"] for item in items}) == len(items)


def test_in_memory_store_cannot_be_mutated_through_results():
    store = InMemoryMenuStore()
    items = run(store.list_items())
    items[0]["price"] = 0
    items.clear()

    assert run(store.list_items())[0] == {"id": 1, "name": "Oats Porridge", "price": 45}
    assert BREAKFAST_MENU[0].price == 45


def test_in_memory_store_accepts_custom_items():
    store = InMemoryMenuStore(BREAKFAST_MENU[1:])
    assert [item["id"] for item in run(store.list_items())] == [2, 3]


def test_database_store_passes_columns_through():
    session = FakeSession(
        rows=[{"item_id": 7, "item_name": "Idli", "cost": 35, "is_veg": True}]
    )
    store = DatabaseMenuStore(lambda: session, table_name="breakfast")

    items = run(store.list_items())

    assert items == [{"item_id": 7, "item_name": "Idli", "cost": 35, "is_veg": True}]
    assert list(items[0]) == ["item_id", "item_name", "cost", "is_veg"]
    sql = str(session.statements[0])
    assert "SELECT *" in sql
    assert "FROM breakfast" in sql
    assert "ORDER BY" not in sql


def test_database_store_returns_empty_list_for_empty_table():
    store = DatabaseMenuStore(lambda: FakeSession(rows=[]))
    assert run(store.list_items()) == []


def test_database_store_wraps_failures():
    cause = OSError("connection refused")
    store = DatabaseMenuStore(lambda: FakeSession(error=cause))

    with pytest.raises(DataUnavailable) as excinfo:
        run(store.list_items())

    assert excinfo.value.__cause__ is cause


def test_build_menu_store_defaults_to_memory(clean_env):
    store = build_menu_store(Settings(_env_file=None))
    assert isinstance(store, InMemoryMenuStore)


def test_build_menu_store_uses_database_when_configured(clean_env):
    config = Settings(
        _env_file=None,
        db_host="db.internal",
        db_user="menu",
        db_password="secret",
        db_name="breakfast",
        menu_table="breakfast_items",
    )
    store = build_menu_store(config)
    try:
        assert isinstance(store, DatabaseMenuStore)
        assert store.table_name == "breakfast_items"
    finally:
        run(store.close())


def test_build_menu_store_explicit_memory_wins(clean_env):
    config = Settings(_env_file=None, menu_store="memory", db_host="db.internal")
    assert isinstance(build_menu_store(config), InMemoryMenuStore)


def test_build_menu_store_requires_database_settings(clean_env):
    with pytest.raises(RuntimeError):
        build_menu_store(Settings(_env_file=None, menu_store="database"))
