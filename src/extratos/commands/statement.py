"""Print the statement for an invoice in text or XML format.

Uso::

    extratos statement FATURA.json PECAS.json [--format xml] [--output-dir PASTA]

Os extratos XML são também gravados em ``Extratos/Extrato_<data>.xml`` (ou na
pasta indicada em ``--output-dir`` / ``EXTRATOS_OUTPUT_DIR``).
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..errors import PersistenceError, StatementError
from ..loader import load_invoices, load_plays
from ..models import StatementFormat
from ..statement import StatementPrinter
from ..storage import StatementStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extratos statement",
        description="Gera o extrato de uma fatura de apresentações teatrais.",
    )
    parser.add_argument("invoice", type=Path, help="Ficheiro JSON com a(s) fatura(s)")
    parser.add_argument("plays", type=Path, help="Ficheiro JSON com o catálogo de peças")
    parser.add_argument(
        "--format",
        dest="statement_format",
        default=StatementFormat.TXT.value,
        help="Formato do extrato: txt (por omissão) ou xml.",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        type=Path,
        help="Pasta onde gravar os extratos XML.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    printer = StatementPrinter(storage=StatementStorage(args.output_dir))
    try:
        invoices = load_invoices(args.invoice)
        plays = load_plays(args.plays)
        for invoice in invoices:
            print(printer.produce_statement(invoice, plays, args.statement_format))
    except PersistenceError as exc:
        print(exc.content)
        print(f"[ERRO] {exc}")
        return 2
    except StatementError as exc:
        print(f"[ERRO] {exc}")
        return 2

    return 0


if __name__ == "__main__":  # pragma: no cover - execução directa
    raise SystemExit(main())
