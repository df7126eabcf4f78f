"""Гарантийный срок ремонтов."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from database.records import RepairJob
from utils.time_utils import from_ms

DEFAULT_WARRANTY_DAYS = 30


@dataclass(frozen=True)
class WarrantyRow:
    job: RepairJob
    expires_at: datetime
    is_active: bool


def warranty_expiry(job: RepairJob, days: int = DEFAULT_WARRANTY_DAYS) -> datetime:
    """Дата окончания гарантии: ``createdAt`` плюс ``days`` суток."""
    return from_ms(job.created_at) + timedelta(days=days)


def warranty_rows(
    repairs: list[RepairJob],
    now: datetime | None = None,
    days: int = DEFAULT_WARRANTY_DAYS,
) -> list[WarrantyRow]:
    now = now or datetime.now()
    rows = []
    for job in repairs:
        expires = warranty_expiry(job, days)
        rows.append(WarrantyRow(job=job, expires_at=expires, is_active=expires > now))
    return rows
