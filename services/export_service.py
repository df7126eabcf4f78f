"""Выгрузка кассовой книги в CSV."""

import logging
import os
from pathlib import Path
from typing import Iterable

from database.records import LedgerEntry
from utils.time_utils import format_ms

logger = logging.getLogger(__name__)

LEDGER_CSV_HEADER = "title,amount,type,note,timestamp"
LEDGER_CSV_NAME = "ledger_export.csv"


def _quote(text: str) -> str:
    return '"' + (text or "").replace('"', '""') + '"'


def ledger_csv_line(entry: LedgerEntry) -> str:
    """Строка CSV для одной записи.

    Текстовые поля всегда в кавычках, сумма и тип без них, время в локальном
    формате ``YYYY-MM-DD HH:MM:SS``.
    """
    return ",".join(
        [
            _quote(entry.title),
            str(float(entry.amount)),
            str(getattr(entry.kind, "value", entry.kind)),
            _quote(entry.note),
            format_ms(entry.timestamp),
        ]
    )


def export_ledger_csv(entries: Iterable[LedgerEntry], path: str | os.PathLike) -> Path:
    """Записать записи кассы в ``path`` в переданном порядке."""
    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(target, "w", newline="", encoding="utf-8") as f:
        f.write(LEDGER_CSV_HEADER + "\n")
        for entry in entries:
            f.write(ledger_csv_line(entry) + "\n")
            count += 1
    logger.info("📤 Выгружено записей кассы: %d -> %s", count, target)
    return target
