"""Сервисные функции для склада запчастей."""

import logging

from database.records import InventoryItem
from database.store import ShopStore

logger = logging.getLogger(__name__)


def add_inventory_item(store: ShopStore, item: InventoryItem) -> int:
    new_id = store.insert(InventoryItem.TABLE, item.to_row())
    logger.info("📦 Позиция склада id=%s: %s × %s", new_id, item.name, item.qty)
    return new_id


def list_inventory_items(store: ShopStore) -> list[InventoryItem]:
    """Все позиции склада, последние добавленные первыми."""
    rows = store.list_all(InventoryItem.TABLE, "id", descending=True)
    return [InventoryItem.from_row(row) for row in rows]


def stock_value(items: list[InventoryItem]) -> float:
    """Закупочная стоимость остатков."""
    return sum(item.qty * item.buy_price for item in items)
