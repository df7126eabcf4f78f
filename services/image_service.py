"""Копирование фотографий ремонтов в каталог приложения."""

import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def _free_path(target: Path) -> Path:
    if not target.exists():
        return target
    counter = 1
    while True:
        candidate = target.with_name(f"{target.stem}_{counter}{target.suffix}")
        if not candidate.exists():
            return candidate
        counter += 1


def store_image(source: str | os.PathLike | None, images_dir: str | os.PathLike) -> str | None:
    """Скопировать снимок в ``images_dir`` и вернуть новый путь.

    ``None`` означает, что съёмку отменили, и возвращается как есть.
    Существующий файл с тем же именем не перезаписывается.
    """
    if source is None:
        return None
    src = Path(source)
    if not src.is_file():
        raise FileNotFoundError(f"Файл изображения не найден: {src}")

    folder = Path(images_dir).expanduser()
    folder.mkdir(parents=True, exist_ok=True)
    if src.resolve().parent == folder.resolve():
        return str(src)

    target = _free_path(folder / src.name)
    shutil.copy2(src, target)
    logger.info("📷 Фото сохранено: %s", target)
    return str(target)
