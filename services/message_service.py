"""Журнал отправленных SMS."""

import logging

from database.records import MessageLog
from database.store import ShopStore

logger = logging.getLogger(__name__)


def add_message_log(store: ShopStore, log: MessageLog) -> int:
    new_id = store.insert(MessageLog.TABLE, log.to_row())
    logger.debug("✉️ Журнал SMS id=%s: %s (%s)", new_id, log.to_number, log.status)
    return new_id


def list_message_logs(store: ShopStore) -> list[MessageLog]:
    """Все попытки отправки, новые (по ``sentAt``) первыми."""
    rows = store.list_all(MessageLog.TABLE, "sentAt", descending=True)
    return [MessageLog.from_row(row) for row in rows]
