"""Сервисные функции для учёта ремонтов."""

import logging
from dataclasses import replace

from database.records import RepairJob
from database.store import ShopStore

logger = logging.getLogger(__name__)


def add_repair(store: ShopStore, job: RepairJob) -> int:
    """Сохранить новый ремонт и вернуть его ``id``."""
    new_id = store.insert(RepairJob.TABLE, job.to_row())
    logger.info("🔧 Ремонт id=%s: %s, %s", new_id, job.customer_name, job.model)
    return new_id


def list_repairs(store: ShopStore) -> list[RepairJob]:
    """Все ремонты, новые (по ``createdAt``) первыми."""
    rows = store.list_all(RepairJob.TABLE, "createdAt", descending=True)
    return [RepairJob.from_row(row) for row in rows]


def update_repair_status(store: ShopStore, job: RepairJob, status: str) -> RepairJob:
    """Сменить статус ремонта, перезаписав строку целиком.

    Единственное обновление «на месте» во всём приложении. Возвращает копию
    ``job`` с новым статусом; исходный объект не меняется.
    """
    if job.id is None:
        raise ValueError("Нельзя сменить статус несохранённого ремонта")
    updated = replace(job, status=status)
    store.update_by_id(RepairJob.TABLE, job.id, updated.to_row())
    logger.info("🔧 Ремонт id=%s: статус -> %s", job.id, status)
    return updated


def repairs_for_phone(repairs: list[RepairJob], phone: str) -> list[RepairJob]:
    """Ремонты с указанным телефоном (в порядке исходного списка)."""
    return [job for job in repairs if job.phone == phone]


def repairs_for_customer(repairs: list[RepairJob], customer) -> list[RepairJob]:
    """Ремонты клиента: совпадение по телефону."""
    return repairs_for_phone(repairs, customer.phone)
