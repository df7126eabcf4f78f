"""Единое место для открытия хранилища из настроек.

Вызывайте :func:`open_store` один раз в entry-point'е и передавайте
полученный объект дальше явно.
"""

from __future__ import annotations

from config import Settings, get_settings

from .store import ShopStore


def open_store(settings: Settings | None = None, path: str | None = None) -> ShopStore:
    """Открыть хранилище по ``path`` или ``settings.database_path``.

    Поддерживает обычный путь к файлу и ``:memory:``.
    """
    settings = settings or get_settings()
    return ShopStore.initialize(path or settings.database_path)
