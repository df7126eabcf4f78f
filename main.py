import argparse
import logging
from pathlib import Path

from config import Settings, get_settings
from core.app_context import AppContext, build_context, get_app_context
from services.dashboard_service import get_dashboard_totals
from services.export_service import LEDGER_CSV_NAME, export_ledger_csv
from services.invoice_service import (
    NoRepairsError,
    invoice_for_latest_repair,
    invoice_for_repair,
)
from services.sms_service import send_sms
from services.warranty_service import warranty_rows
from utils.logging_config import setup_logging
from utils.money import format_money
from utils.time_utils import TIME_FORMAT

__all__ = ["main", "build_parser"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="repair-shop", description="Учёт мастерской по ремонту телефонов")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("summary", help="итоги кассы и ремонтов")

    export = sub.add_parser("export-ledger", help="выгрузить кассу в CSV")
    export.add_argument("--output", type=Path, default=None)

    invoice = sub.add_parser("invoice", help="PDF-квитанция по ремонту")
    invoice.add_argument("--repair-id", type=int, default=None)
    invoice.add_argument("--output", type=Path, default=None)

    sub.add_parser("warranty", help="гарантийные сроки ремонтов")

    sms = sub.add_parser("sms", help="отправить SMS и записать в журнал")
    sms.add_argument("to")
    sms.add_argument("message")
    return parser


def _summary(context: AppContext) -> int:
    state = context.state
    totals = get_dashboard_totals(state.ledger, state.repairs)
    symbol = context.settings.currency_symbol
    print(f"Income:  {format_money(totals.income, symbol)}")
    print(f"Expense: {format_money(totals.expense, symbol)}")
    print(f"Balance: {format_money(totals.balance, symbol)}")
    print(f"Repairs pending: {totals.pending_repairs}")
    print(f"Repairs completed: {totals.completed_repairs}")
    return 0


def _export(context: AppContext, output: Path | None) -> int:
    target = output or Path(context.settings.data_dir).expanduser() / LEDGER_CSV_NAME
    path = export_ledger_csv(context.state.ledger, target)
    print(f"Exported to {path}")
    return 0


def _invoice(context: AppContext, repair_id: int | None, output: Path | None) -> int:
    try:
        if repair_id is None:
            job, data = invoice_for_latest_repair(context.state)
        else:
            job, data = invoice_for_repair(context.state, repair_id)
    except NoRepairsError as exc:
        print(exc)
        return 1
    target = output or Path(context.settings.data_dir).expanduser() / f"invoice_{job.id}.pdf"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)
    print(f"Invoice saved to {target}")
    return 0


def _warranty(context: AppContext) -> int:
    for row in warranty_rows(context.state.repairs, days=context.settings.warranty_days):
        mark = "active" if row.is_active else "expired"
        print(
            f"{row.job.customer_name} • {row.job.model}: "
            f"{row.expires_at.strftime(TIME_FORMAT)} ({mark}, {row.job.status})"
        )
    return 0


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Точка входа командной строки."""

    args = build_parser().parse_args(argv)
    if settings is None:
        settings = get_settings()
        context = get_app_context()
    else:
        context = build_context(settings)
    setup_logging(settings)

    logger.info("Команда: %s", args.command or "summary")

    if args.command == "export-ledger":
        return _export(context, args.output)
    if args.command == "invoice":
        return _invoice(context, args.repair_id, args.output)
    if args.command == "warranty":
        return _warranty(context)
    if args.command == "sms":
        result = send_sms(context.state, context.sms_gateway, args.to, args.message)
        print(result.text)
        return 0 if result.ok else 1
    return _summary(context)


if __name__ == "__main__":
    raise SystemExit(main())
