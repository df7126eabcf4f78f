"""Снимок всех пяти таблиц в памяти с уведомлением подписчиков.

После каждой записи соответствующий список перечитывается из хранилища
целиком, поэтому кэш всегда совпадает с базой сразу после завершения
операции.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from database.records import (
    Customer,
    InventoryItem,
    LedgerEntry,
    MessageLog,
    RepairJob,
)
from database.store import ShopStore
from services import (
    customer_service,
    inventory_service,
    ledger_service,
    message_service,
    repair_service,
)

logger = logging.getLogger(__name__)


class StateStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class Entity(str, Enum):
    LEDGER = "ledger"
    REPAIRS = "repairs"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    MESSAGES = "message_log"


class StateNotReady(RuntimeError):
    """Чтение или запись до завершения :meth:`AppState.load`."""


@dataclass(frozen=True)
class StateChange:
    """Новое содержимое одного списка после перечитывания."""

    entity: Entity
    items: tuple[Any, ...]
    version: int


Subscriber = Callable[[StateChange], None]

_LOADERS: dict[Entity, Callable[[ShopStore], list]] = {
    Entity.LEDGER: ledger_service.list_ledger_entries,
    Entity.REPAIRS: repair_service.list_repairs,
    Entity.INVENTORY: inventory_service.list_inventory_items,
    Entity.CUSTOMERS: customer_service.list_customers,
    Entity.MESSAGES: message_service.list_message_logs,
}


class AppState:
    """Кэш приложения: ``UNINITIALIZED → LOADING → READY``."""

    def __init__(self, store: ShopStore):
        self._store = store
        self._status = StateStatus.UNINITIALIZED
        self._lists: dict[Entity, list] = {entity: [] for entity in Entity}
        self._versions: dict[Entity, int] = {entity: 0 for entity in Entity}
        self._subscribers: list[tuple[Subscriber, Entity | None]] = []

    @property
    def store(self) -> ShopStore:
        return self._store

    @property
    def status(self) -> StateStatus:
        return self._status

    @property
    def is_ready(self) -> bool:
        return self._status is StateStatus.READY

    def load(self) -> "AppState":
        """Прочитать все пять таблиц и перейти в ``READY``."""
        self._status = StateStatus.LOADING
        try:
            lists = {entity: loader(self._store) for entity, loader in _LOADERS.items()}
        except Exception:
            self._status = StateStatus.UNINITIALIZED
            raise
        self._lists = lists
        self._status = StateStatus.READY
        logger.info(
            "Состояние загружено: %s",
            ", ".join(f"{e.value}={len(items)}" for e, items in lists.items()),
        )
        for entity in Entity:
            self._publish(entity)
        return self

    # ───────────────────────────── чтение ─────────────────────────────

    def items(self, entity: Entity) -> list:
        self._require_ready()
        return list(self._lists[entity])

    def version(self, entity: Entity) -> int:
        """Счётчик перечитываний списка, для опроса без подписки."""
        return self._versions[entity]

    @property
    def ledger(self) -> list[LedgerEntry]:
        return self.items(Entity.LEDGER)

    @property
    def repairs(self) -> list[RepairJob]:
        return self.items(Entity.REPAIRS)

    @property
    def inventory(self) -> list[InventoryItem]:
        return self.items(Entity.INVENTORY)

    @property
    def customers(self) -> list[Customer]:
        return self.items(Entity.CUSTOMERS)

    @property
    def message_logs(self) -> list[MessageLog]:
        return self.items(Entity.MESSAGES)

    # ──────────────────────────── подписки ────────────────────────────

    def subscribe(
        self, callback: Subscriber, entity: Entity | None = None
    ) -> Callable[[], None]:
        """Подписаться на изменения (всех списков или одного).

        Возвращает функцию отписки.
        """
        entry = (callback, entity)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def _publish(self, entity: Entity) -> None:
        self._versions[entity] += 1
        change = StateChange(
            entity=entity,
            items=tuple(self._lists[entity]),
            version=self._versions[entity],
        )
        for callback, wanted in list(self._subscribers):
            if wanted is not None and wanted != entity:
                continue
            try:
                callback(change)
            except Exception:
                logger.exception("Ошибка в подписчике на %s", entity.value)

    # ───────────────────────────── запись ─────────────────────────────

    def add_ledger_entry(self, entry: LedgerEntry) -> int:
        return self._write(Entity.LEDGER, ledger_service.add_ledger_entry, entry)

    def add_repair(self, job: RepairJob) -> int:
        return self._write(Entity.REPAIRS, repair_service.add_repair, job)

    def add_inventory_item(self, item: InventoryItem) -> int:
        return self._write(Entity.INVENTORY, inventory_service.add_inventory_item, item)

    def add_customer(self, customer: Customer) -> int:
        return self._write(Entity.CUSTOMERS, customer_service.add_customer, customer)

    def add_message_log(self, log: MessageLog) -> int:
        return self._write(Entity.MESSAGES, message_service.add_message_log, log)

    def set_repair_status(self, job: RepairJob, status: str) -> RepairJob:
        """Записать новый статус в базу и перечитать список ремонтов."""
        self._require_ready()
        updated = repair_service.update_repair_status(self._store, job, status)
        self.reload(Entity.REPAIRS)
        return updated

    def reload(self, entity: Entity) -> list:
        """Перечитать один список из хранилища и уведомить подписчиков."""
        self._require_ready()
        self._lists[entity] = _LOADERS[entity](self._store)
        self._publish(entity)
        return list(self._lists[entity])

    def _write(self, entity: Entity, add: Callable[[ShopStore, Any], int], record: Any) -> int:
        self._require_ready()
        new_id = add(self._store, record)
        self.reload(entity)
        return new_id

    def _require_ready(self) -> None:
        if self._status is not StateStatus.READY:
            raise StateNotReady(f"Состояние ещё не загружено ({self._status.value})")
