from datetime import datetime, tzinfo
import time

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def now_ms() -> int:
    """Текущее время в миллисекундах с эпохи."""
    return time.time_ns() // 1_000_000


def from_ms(value: int, tz: tzinfo | None = None) -> datetime:
    """Перевести миллисекунды эпохи в локальный ``datetime``."""
    return datetime.fromtimestamp(value / 1000, tz)


def format_ms(value: int, tz: tzinfo | None = None) -> str:
    """Return epoch milliseconds as string in the common format."""
    return from_ms(value, tz).strftime(TIME_FORMAT)
