"""PDF-квитанция по ремонту (fpdf2)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fpdf import FPDF

from database.records import Customer, RepairJob
from services.customer_service import customer_for_job
from utils.time_utils import format_ms

if TYPE_CHECKING:
    from core.app_state import AppState

logger = logging.getLogger(__name__)

SHOP_TITLE = "Repair Invoice"


class NoRepairsError(LookupError):
    """Нет ни одного ремонта для квитанции."""


def _latin1(text: str) -> str:
    # встроенные шрифты PDF поддерживают только latin-1
    return (text or "").encode("latin-1", "replace").decode("latin-1")


def generate_invoice_pdf(job: RepairJob, customer: Customer | None = None) -> bytes:
    """Сформировать одностраничную квитанцию и вернуть байты PDF.

    Имя берётся у клиента, если он передан, иначе из самого ремонта.
    """
    name = customer.name if customer is not None else job.customer_name

    pdf = FPDF()
    pdf.add_page()
    pdf.set_auto_page_break(auto=True, margin=15)

    pdf.set_font("Helvetica", "B", 24)
    pdf.cell(0, 12, SHOP_TITLE, new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    pdf.set_font("Helvetica", "", 12)
    for label, value in (
        ("Customer", name),
        ("Phone", job.phone),
        ("Model", job.model),
        ("IMEI", job.imei),
        ("Date", format_ms(job.created_at)),
        ("Status", job.status),
    ):
        pdf.cell(0, 7, _latin1(f"{label}: {value}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)
    pdf.multi_cell(0, 7, _latin1(f"Problem: {job.problem}"), new_x="LMARGIN", new_y="NEXT")
    pdf.ln(8)
    pdf.cell(0, 7, "Thank you for your business.", new_x="LMARGIN", new_y="NEXT")

    data = bytes(pdf.output())
    logger.info("🧾 Квитанция для ремонта id=%s: %d байт", job.id, len(data))
    return data


def invoice_for_latest_repair(state: "AppState") -> tuple[RepairJob, bytes]:
    """Квитанция для самого нового ремонта из кэша."""
    repairs = state.repairs
    if not repairs:
        raise NoRepairsError("Ремонтов пока нет")
    job = repairs[0]
    customer = customer_for_job(state.customers, job)
    return job, generate_invoice_pdf(job, customer)


def invoice_for_repair(state: "AppState", repair_id: int) -> tuple[RepairJob, bytes]:
    job = next((r for r in state.repairs if r.id == repair_id), None)
    if job is None:
        raise NoRepairsError(f"Ремонт id={repair_id} не найден")
    customer = customer_for_job(state.customers, job)
    return job, generate_invoice_pdf(job, customer)
