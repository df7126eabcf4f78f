import pytest

from database.records import Customer
from services.invoice_service import (
    NoRepairsError,
    generate_invoice_pdf,
    invoice_for_latest_repair,
    invoice_for_repair,
)


def test_generate_invoice_pdf_returns_pdf_bytes(make_repair):
    data = generate_invoice_pdf(make_repair(id=1, created_at=1_700_000_000_000))

    assert isinstance(data, bytes)
    assert data.startswith(b"%PDF")


def test_generate_invoice_handles_non_latin_text(make_repair, make_customer):
    job = make_repair(problem="डिस्प्ले टूटा", created_at=1)
    data = generate_invoice_pdf(job, make_customer(name="रवि"))
    assert data.startswith(b"%PDF")


def test_latest_repair_invoice_uses_matching_customer(state, make_repair, monkeypatch):
    state.add_customer(Customer(name="Ravi Kumar", phone="555"))
    state.add_repair(make_repair(customer_name="R", phone="555", created_at=1))
    state.add_repair(make_repair(customer_name="Walk-in", phone="999", created_at=2))

    seen = {}

    def fake_pdf(job, customer=None):
        seen["job"] = job
        seen["customer"] = customer
        return b"%PDF-fake"

    monkeypatch.setattr("services.invoice_service.generate_invoice_pdf", fake_pdf)

    job, data = invoice_for_latest_repair(state)

    assert data == b"%PDF-fake"
    assert job.customer_name == "Walk-in"
    assert seen["customer"] == Customer(name="Walk-in", phone="999")

    older = state.repairs[1]
    invoice_for_repair(state, older.id)
    assert seen["customer"].name == "Ravi Kumar"


def test_invoice_without_repairs(state):
    with pytest.raises(NoRepairsError):
        invoice_for_latest_repair(state)
    with pytest.raises(NoRepairsError):
        invoice_for_repair(state, 1)
