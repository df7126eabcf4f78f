"""Tests for :mod:`database.store`."""

import pytest

from database.migrate import SCHEMA_VERSION
from database.store import (
    RecordNotFound,
    ShopStore,
    StorageUnavailable,
    StoreNotInitialized,
)


def _ledger_row(title, timestamp, amount=10.0, kind="income"):
    return {
        "id": None,
        "title": title,
        "amount": amount,
        "type": kind,
        "note": "",
        "timestamp": timestamp,
    }


def test_initialize_creates_five_tables(store):
    assert store.table_names() == [
        "customers",
        "inventory",
        "ledger",
        "message_log",
        "repairs",
    ]
    assert store.schema_version == SCHEMA_VERSION


def test_table_names_hide_sqlite_internal_tables(store):
    store.insert("ledger", _ledger_row("Battery", 100))

    assert not [name for name in store.table_names() if name.startswith("sqlite_")]
    assert len(store.table_names()) == 5


def test_schema_columns_and_autoincrement(store):
    columns = [c.name for c in store.database.get_columns("repairs")]
    assert columns == [
        "id",
        "customerName",
        "phone",
        "model",
        "imei",
        "problem",
        "status",
        "imagePath",
        "createdAt",
    ]
    ddl = store.database.execute_sql(
        "SELECT sql FROM sqlite_master WHERE name = 'ledger'"
    ).fetchone()[0]
    assert "AUTOINCREMENT" in ddl.upper()


def test_schema_applied_once_and_data_survives_reopen(tmp_path):
    path = tmp_path / "shop" / "app_data.db"
    first = ShopStore.initialize(path)
    first.insert("ledger", _ledger_row("Battery", 100))
    first.close()

    second = ShopStore.initialize(path)
    try:
        assert second.schema_version == SCHEMA_VERSION
        rows = second.list_all("ledger", "timestamp")
        assert [r["title"] for r in rows] == ["Battery"]
    finally:
        second.close()


def test_initialize_unwritable_path(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")

    with pytest.raises(StorageUnavailable):
        ShopStore.initialize(blocker / "app_data.db")


def test_insert_always_appends(store):
    first = store.insert("customers", {"id": None, "name": "A", "phone": "1"})
    second = store.insert("customers", {"id": first, "name": "A", "phone": "1"})

    assert second == first + 1
    assert len(store.list_all("customers", "id")) == 2


def test_list_all_orders_descending_with_id_tiebreak(store):
    a = store.insert("ledger", _ledger_row("a", 100))
    b = store.insert("ledger", _ledger_row("b", 300))
    c = store.insert("ledger", _ledger_row("c", 200))
    d = store.insert("ledger", _ledger_row("d", 300))

    rows = store.list_all("ledger", "timestamp", descending=True)
    assert [r["id"] for r in rows] == [d, b, c, a]

    rows = store.list_all("ledger", "timestamp", descending=False)
    assert [r["id"] for r in rows] == [a, c, b, d]


def test_rows_keyed_by_column_names(store):
    store.insert(
        "message_log",
        {"id": None, "toNumber": "123", "message": "hi", "sentAt": 5, "status": "sent"},
    )
    (row,) = store.list_all("message_log", "sentAt")
    assert set(row) == {"id", "toNumber", "message", "sentAt", "status"}


def test_update_by_id_overwrites_row(store):
    row = {
        "id": None,
        "customerName": "Ravi",
        "phone": "1",
        "model": "M",
        "imei": "I",
        "problem": "P",
        "status": "Pending",
        "imagePath": None,
        "createdAt": 1,
    }
    new_id = store.insert("repairs", row)
    store.update_by_id("repairs", new_id, {**row, "id": new_id, "status": "Completed"})

    (saved,) = store.list_all("repairs", "createdAt")
    assert saved["status"] == "Completed"
    assert saved["id"] == new_id


def test_update_by_id_missing_row(store):
    with pytest.raises(RecordNotFound):
        store.update_by_id("customers", 42, {"name": "X"})


def test_unknown_table_and_column(store):
    with pytest.raises(ValueError):
        store.insert("payments", {"amount": 1})
    with pytest.raises(ValueError):
        store.list_all("ledger", "created")


def test_uninitialized_store_fails_fast():
    with pytest.raises(StoreNotInitialized):
        ShopStore().list_all("ledger", "timestamp")


def test_closed_store_fails_fast(tmp_path):
    shop_store = ShopStore.initialize(tmp_path / "db.sqlite")
    shop_store.close()

    assert not shop_store.is_open
    with pytest.raises(StoreNotInitialized):
        shop_store.insert("ledger", _ledger_row("x", 1))
