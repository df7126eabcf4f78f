"""Сервисный модуль для управления клиентами."""

import logging

from database.records import Customer, RepairJob
from database.store import ShopStore

logger = logging.getLogger(__name__)


def add_customer(store: ShopStore, customer: Customer) -> int:
    """Сохранить клиента и вернуть его ``id``.

    Уникальность телефона не проверяется.
    """
    new_id = store.insert(Customer.TABLE, customer.to_row())
    logger.info("👤 Клиент id=%s: %s", new_id, customer.name)
    return new_id


def list_customers(store: ShopStore) -> list[Customer]:
    """Все клиенты, последние добавленные первыми."""
    rows = store.list_all(Customer.TABLE, "id", descending=True)
    return [Customer.from_row(row) for row in rows]


def find_customer_by_phone(customers: list[Customer], phone: str) -> Customer | None:
    """Первый клиент из списка с точно таким телефоном."""
    return next((c for c in customers if c.phone == phone), None)


def customer_for_job(customers: list[Customer], job: RepairJob) -> Customer:
    """Клиент ремонта по телефону.

    Если такого клиента нет, возвращается несохранённый клиент с именем и
    телефоном из самого ремонта.
    """
    customer = find_customer_by_phone(customers, job.phone)
    if customer is None:
        logger.debug("Клиент с телефоном %s не найден, используем данные ремонта", job.phone)
        customer = Customer(name=job.customer_name, phone=job.phone)
    return customer
