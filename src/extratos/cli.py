"""Command line entry points for theatrical statements."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Iterable, Mapping, Sequence

from .commands import report, statement
from .settings import LOG_FILENAME, resolve_log_dir

CommandCallable = Callable[[list[str] | None], int | None]


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing a CLI command exposed by :mod:`extratos.cli`."""

    name: str
    summary: str
    handler: CommandCallable

    def run(self, argv: list[str] | None) -> int:
        """Execute the command and normalise the resulting exit code."""

        try:
            result = self.handler(argv)
        except SystemExit as exc:  # argparse exits on --help and bad usage
            code = exc.code
            if code is None:
                return 0
            if isinstance(code, int):
                return code
            print(str(code), file=sys.stderr)
            return 1
        if result is None:
            return 0
        return int(result)


_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(
        name="statement",
        summary="Gera o extrato (TXT ou XML) de uma fatura.",
        handler=statement.main,
    ),
    CommandSpec(
        name="report",
        summary="Gera um relatório Excel com o detalhe do extrato.",
        handler=report.main,
    ),
)

_COMMAND_INDEX: Mapping[str, CommandSpec] = {spec.name: spec for spec in _COMMANDS}


def available_commands() -> Iterable[CommandSpec]:
    """Return the commands registered in the CLI."""

    return _COMMANDS


def configure_logging(log_dir: Path | None = None) -> logging.Logger:
    """Send the ``extratos`` loggers to a rotating file."""

    log_dir = log_dir if log_dir is not None else resolve_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger("extratos")
    if not logger.handlers:
        handler = RotatingFileHandler(
            log_dir / LOG_FILENAME,
            maxBytes=1_000_000,
            backupCount=5,
            encoding="utf-8",
        )
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    logging.captureWarnings(True)
    return logger


def build_parser() -> argparse.ArgumentParser:
    """Return the base argument parser shared across commands."""

    parser = argparse.ArgumentParser(description="Extratos de apresentações teatrais")
    parser.add_argument(
        "--log-dir",
        dest="log_dir",
        type=Path,
        help="Pasta para o ficheiro de log (por omissão EXTRATOS_LOG_DIR ou work/logs).",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="comando")
    subparsers.required = True

    for spec in _COMMANDS:
        subparser = subparsers.add_parser(
            spec.name,
            help=spec.summary,
            description=spec.summary,
            add_help=False,
        )
        subparser.add_argument("args", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)

    return parser


def run(command: str, argv: Sequence[str] | None = None) -> int:
    """Execute *command* forwarding ``argv`` to the underlying handler."""

    spec = _COMMAND_INDEX.get(command)
    if spec is None:
        raise ValueError(f"Comando desconhecido: {command}")
    return spec.run(list(argv or []))


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the command line interface."""

    parser = build_parser()
    namespace, extras = parser.parse_known_args(argv)
    configure_logging(namespace.log_dir)

    forwarded = list(namespace.args) + extras
    return run(namespace.command, forwarded)


if __name__ == "__main__":  # pragma: no cover - execução directa
    raise SystemExit(main())
