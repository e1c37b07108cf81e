"""Excel summaries of computed statements."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook

from .models import StatementData

SHEET_TITLE = "Extrato"
COLUMNS = ("Peça", "Valor", "Créditos", "Lugares")


def default_report_destination(invoice_path: Path) -> Path:
    """Return ``<stem>_extrato.xlsx`` next to ``invoice_path``."""

    invoice_path = Path(invoice_path)
    return invoice_path.with_name(f"{invoice_path.stem}_extrato.xlsx")


def write_excel_report(data: StatementData, destination: Path) -> Path:
    """Write one row per performance followed by the statement totals."""

    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = SHEET_TITLE
    worksheet.append(["Cliente", data.customer])
    worksheet.append([])
    worksheet.append(list(COLUMNS))

    for detail in data.details:
        worksheet.append(
            [
                detail.play_name,
                detail.amount_owed,
                detail.earned_credits,
                detail.seats,
            ]
        )

    worksheet.append([])
    worksheet.append(
        [
            "Total",
            data.totals.total_amount,
            data.totals.total_credits,
            sum(detail.seats for detail in data.details),
        ]
    )

    widths = {"A": 40, "B": 16, "C": 12, "D": 12}
    for column, width in widths.items():
        worksheet.column_dimensions[column].width = width

    workbook.save(destination)
    return destination


__all__ = ["COLUMNS", "default_report_destination", "write_excel_report"]
