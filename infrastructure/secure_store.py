"""Защищённое хранилище паролей и ключей поверх системного keyring.

Хранилище не связано с базой мастерской. Бэкенды keyring не умеют
перечислять записи, поэтому список ключей лежит в отдельной служебной записи.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import keyring
from keyring.errors import PasswordDeleteError

logger = logging.getLogger(__name__)

INDEX_KEY = "__keys__"


class SecureStore:
    def __init__(self, service: str, backend: Any = None):
        self.service = service
        self._backend = backend if backend is not None else keyring.get_keyring()

    def keys(self) -> list[str]:
        raw = self._backend.get_password(self.service, INDEX_KEY)
        if not raw:
            return []
        try:
            return list(json.loads(raw))
        except (json.JSONDecodeError, TypeError):
            logger.warning("Повреждён список ключей в %s, начинаем заново", self.service)
            return []

    def _write_keys(self, keys: list[str]) -> None:
        self._backend.set_password(self.service, INDEX_KEY, json.dumps(sorted(keys)))

    def save(self, key: str, value: str) -> None:
        key = (key or "").strip()
        if not key or key == INDEX_KEY:
            raise ValueError(f"Недопустимый ключ: {key!r}")
        self._backend.set_password(self.service, key, value)
        keys = self.keys()
        if key not in keys:
            self._write_keys(keys + [key])
        logger.info("🔐 Сохранён ключ %s", key)

    def read(self, key: str) -> str | None:
        return self._backend.get_password(self.service, key)

    def delete(self, key: str) -> None:
        """Удалить ключ; отсутствующий ключ не считается ошибкой."""
        try:
            self._backend.delete_password(self.service, key)
        except PasswordDeleteError:
            logger.debug("Ключ %s уже отсутствует", key)
        keys = self.keys()
        if key in keys:
            keys.remove(key)
            self._write_keys(keys)
        logger.info("🔐 Удалён ключ %s", key)

    def read_all(self) -> dict[str, str]:
        result = {}
        for key in self.keys():
            value = self.read(key)
            if value is not None:
                result[key] = value
        return result
