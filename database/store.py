"""Встроенное SQLite-хранилище мастерской.

:class:`ShopStore` владеет единственным соединением с файлом базы и
выполняет три примитива: добавление строки, полную выборку с сортировкой и
перезапись строки по ``id``. Строки передаются словарями с именами колонок
в том виде, в каком они лежат в файле (``customerName``, ``sentAt`` …).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

from peewee import DatabaseError, Field, SqliteDatabase

from .migrate import apply_schema, get_schema_version
from .models import ALL_MODELS, TABLES, BaseModel

logger = logging.getLogger(__name__)

MEMORY = ":memory:"

Row = dict[str, Any]


class StorageUnavailable(RuntimeError):
    """Файл базы нельзя создать или открыть на запись."""


class StoreNotInitialized(RuntimeError):
    """Хранилище используется до :meth:`ShopStore.initialize` или после закрытия."""


class RecordNotFound(LookupError):
    """Строка с указанным ``id`` отсутствует."""

    def __init__(self, table: str, record_id: int):
        super().__init__(f"В таблице {table} нет записи с id={record_id}")
        self.table = table
        self.record_id = record_id


def _check_writable(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailable(f"Не удалось создать каталог {path.parent}: {exc}") from exc
    if path.exists():
        if path.is_dir() or not os.access(path, os.W_OK):
            raise StorageUnavailable(f"Файл базы {path} недоступен для записи")
    elif not os.access(path.parent, os.W_OK):
        raise StorageUnavailable(f"Каталог {path.parent} недоступен для записи")


class ShopStore:
    """Хранилище пяти таблиц с явным временем жизни."""

    def __init__(self, database: SqliteDatabase | None = None):
        self._database = database

    @classmethod
    def initialize(cls, path: str | os.PathLike) -> "ShopStore":
        """Открыть (или создать) файл базы и применить схему."""
        location = str(path)
        if location != MEMORY:
            target = Path(location).expanduser()
            _check_writable(target)
            location = str(target)

        database = SqliteDatabase(location)
        try:
            database.connect(reuse_if_open=True)
            apply_schema(database)
        except (DatabaseError, OSError) as exc:
            if not database.is_closed():
                database.close()
            raise StorageUnavailable(f"Не удалось открыть базу {location}: {exc}") from exc

        logger.info("Хранилище открыто: %s", location)
        return cls(database)

    # ─────────────────────────── состояние ───────────────────────────

    @property
    def database(self) -> SqliteDatabase:
        if self._database is None:
            raise StoreNotInitialized("Хранилище не инициализировано")
        return self._database

    @property
    def is_open(self) -> bool:
        return self._database is not None

    @property
    def schema_version(self) -> int:
        return get_schema_version(self.database)

    def table_names(self) -> list[str]:
        """Таблицы мастерской без служебных таблиц SQLite (``sqlite_sequence``)."""
        return sorted(
            name for name in self.database.get_tables() if not name.startswith("sqlite_")
        )

    def close(self) -> None:
        if self._database is None:
            return
        if not self._database.is_closed():
            self._database.close()
        self._database = None
        logger.info("Хранилище закрыто")

    # ─────────────────────────── операции ────────────────────────────

    def insert(self, table: str, row: Mapping[str, Any]) -> int:
        """Добавить строку и вернуть выданный базой ``id``."""
        database = self.database
        model = _model_for(table)
        data = _field_data(model, row)
        with database.bind_ctx(ALL_MODELS):
            new_id = model.insert(data).execute()
        logger.debug("➕ %s: добавлена запись id=%s", table, new_id)
        return int(new_id)

    def list_all(self, table: str, order_by: str, descending: bool = True) -> list[Row]:
        """Вернуть все строки таблицы, отсортированные по колонке ``order_by``.

        При равных значениях порядок определяет ``id`` в том же направлении.
        """
        database = self.database
        model = _model_for(table)
        field = _field_for(model, order_by)
        pk = model._meta.primary_key
        orders = [field.desc() if descending else field.asc()]
        if field is not pk:
            orders.append(pk.desc() if descending else pk.asc())

        fields = model._meta.sorted_fields
        columns = [f.column_name for f in fields]
        with database.bind_ctx(ALL_MODELS):
            query = model.select(*fields).order_by(*orders).tuples()
            return [dict(zip(columns, values)) for values in query]

    def update_by_id(self, table: str, record_id: int, row: Mapping[str, Any]) -> None:
        """Перезаписать все колонки строки с указанным ``id``."""
        database = self.database
        model = _model_for(table)
        data = _field_data(model, row)
        with database.bind_ctx(ALL_MODELS):
            updated = (
                model.update(data)
                .where(model._meta.primary_key == record_id)
                .execute()
            )
        if not updated:
            raise RecordNotFound(table, record_id)
        logger.debug("✏️ %s: обновлена запись id=%s", table, record_id)


def _model_for(table: str) -> type[BaseModel]:
    try:
        return TABLES[table]
    except KeyError:
        raise ValueError(f"Неизвестная таблица: {table}") from None


def _field_for(model: type[BaseModel], column: str) -> Field:
    try:
        return model._meta.columns[column]
    except KeyError:
        raise ValueError(
            f"Неизвестная колонка {column} в таблице {model._meta.table_name}"
        ) from None


def _field_data(model: type[BaseModel], row: Mapping[str, Any]) -> dict[Field, Any]:
    # id выдаёт только база: при вставке и при перезаписи он не пишется
    pk_column = model._meta.primary_key.column_name
    return {
        _field_for(model, column): value
        for column, value in row.items()
        if column != pk_column
    }
