"""Generate an Excel summary with the statement of an invoice."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..aggregation import aggregate
from ..errors import StatementError
from ..loader import load_invoice, load_plays
from ..reporting import default_report_destination, write_excel_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extratos report",
        description="Gera um relatório em Excel com os valores e créditos por apresentação.",
    )
    parser.add_argument("invoice", type=Path, help="Ficheiro JSON com a fatura")
    parser.add_argument("plays", type=Path, help="Ficheiro JSON com o catálogo de peças")
    parser.add_argument(
        "--output",
        dest="output",
        type=Path,
        help="Caminho do ficheiro .xlsx (por omissão junto à fatura).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        data = aggregate(load_invoice(args.invoice), load_plays(args.plays))
    except StatementError as exc:
        print(f"[ERRO] {exc}")
        return 2

    destination = args.output or default_report_destination(args.invoice)
    write_excel_report(data, destination)
    print(f"[OK] Relatório do extrato guardado em: {destination}")

    return 0


if __name__ == "__main__":  # pragma: no cover - execução directa
    raise SystemExit(main())
