from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from openpyxl import load_workbook

from extratos.aggregation import aggregate
from extratos.reporting import COLUMNS, default_report_destination, write_excel_report


def test_default_report_destination():
    assert default_report_destination(Path("dados/fatura.json")) == Path(
        "dados/fatura_extrato.xlsx"
    )


def test_excel_report_contains_details_and_totals(tmp_path, invoice, plays):
    destination = tmp_path / "relatorios" / "extrato.xlsx"

    written = write_excel_report(aggregate(invoice, plays), destination)

    assert written == destination
    workbook = load_workbook(destination)
    rows = list(workbook["Extrato"].iter_rows(values_only=True))

    assert rows[0][:2] == ("Cliente", "BigCo")
    assert rows[2] == COLUMNS
    assert rows[3][0] == "Hamlet"
    assert Decimal(str(rows[3][1])) == Decimal("650")
    assert rows[3][2:] == (25, 55)
    assert [row[0] for row in rows[4:6]] == ["As You Like It", "Othello"]

    total_row = rows[-1]
    assert total_row[0] == "Total"
    assert Decimal(str(total_row[1])) == Decimal("1653")
    assert total_row[2:] == (47, 130)
