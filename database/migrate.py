"""Create database tables if they don't exist."""

from __future__ import annotations

import logging

from peewee import SqliteDatabase

from .models import ALL_MODELS

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def get_schema_version(database: SqliteDatabase) -> int:
    return int(database.pragma("user_version") or 0)


def apply_schema(database: SqliteDatabase) -> bool:
    """Создать схему версии 1, если файл ещё пустой.

    Версия хранится в ``PRAGMA user_version``; повторный вызов ничего не
    меняет. Возвращает ``True``, если таблицы были созданы.
    """
    current = get_schema_version(database)
    if current >= SCHEMA_VERSION:
        return False

    with database.bind_ctx(ALL_MODELS):
        with database.atomic():
            database.create_tables(ALL_MODELS, safe=True)
    database.pragma("user_version", SCHEMA_VERSION)
    logger.info("Схема БД создана: версия %s -> %s", current, SCHEMA_VERSION)
    return True


def main() -> None:
    from config import get_settings
    from .init import open_store

    open_store(get_settings())


if __name__ == "__main__":
    main()
