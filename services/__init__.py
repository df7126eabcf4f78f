"""Пакет прикладных сервисов.

Подмодули не импортируются на уровне пакета, чтобы ``import services`` не
тянул fpdf2 и twilio. Импортируйте нужные модули напрямую, например:
    from services import ledger_service
    from services.invoice_service import generate_invoice_pdf
"""

__all__: list[str] = []
