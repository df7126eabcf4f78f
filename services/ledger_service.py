"""Сервисные функции для кассовой книги (доходы и расходы)."""

import logging

from database.records import LedgerEntry
from database.store import ShopStore

logger = logging.getLogger(__name__)


def add_ledger_entry(store: ShopStore, entry: LedgerEntry) -> int:
    """Сохранить запись кассы и вернуть её ``id``."""
    new_id = store.insert(LedgerEntry.TABLE, entry.to_row())
    logger.info("💰 Запись кассы id=%s: %s %s", new_id, entry.kind, entry.amount)
    return new_id


def list_ledger_entries(store: ShopStore) -> list[LedgerEntry]:
    """Все записи кассы, новые (по ``timestamp``) первыми."""
    rows = store.list_all(LedgerEntry.TABLE, "timestamp", descending=True)
    return [LedgerEntry.from_row(row) for row in rows]
