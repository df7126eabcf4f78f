"""Функции для получения сводной информации на дашборд."""

from dataclasses import dataclass
from typing import Iterable

from database.records import LedgerEntry, LedgerKind, RepairJob


@dataclass(frozen=True)
class DashboardTotals:
    income: float
    expense: float
    pending_repairs: int
    completed_repairs: int

    @property
    def balance(self) -> float:
        return self.income - self.expense


def sum_by_kind(entries: Iterable[LedgerEntry], kind: str) -> float:
    """Сумма записей одного типа; суммы складываются как хранятся."""
    return sum(e.amount for e in entries if e.kind == kind)


def get_dashboard_totals(
    entries: list[LedgerEntry], repairs: list[RepairJob]
) -> DashboardTotals:
    """Вернуть итоги кассы и счётчики ремонтов.

    Незавершённым считается любой ремонт со статусом, отличным от
    ``Completed``.
    """
    completed = sum(1 for r in repairs if r.is_completed)
    return DashboardTotals(
        income=sum_by_kind(entries, LedgerKind.INCOME.value),
        expense=sum_by_kind(entries, LedgerKind.EXPENSE.value),
        pending_repairs=len(repairs) - completed,
        completed_repairs=completed,
    )
