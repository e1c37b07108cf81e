"""Persistence of rendered statements under the ``Extratos`` folder."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from .errors import PersistenceError
from .models import StatementFormat
from .settings import resolve_output_dir

LOGGER = logging.getLogger("extratos.storage")

Clock = Callable[[], datetime]


class StatementStorage:
    """Write statements to ``Extrato_<YYYYMMDD_HHMMSS>.<ext>`` files.

    When ``output_dir`` is omitted the folder is resolved from
    :func:`extratos.settings.resolve_output_dir` on every save.
    """

    def __init__(self, output_dir: Path | None = None, *, clock: Clock = datetime.now) -> None:
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.clock = clock

    def destination_for(self, statement_format: StatementFormat) -> Path:
        folder = self.output_dir if self.output_dir is not None else resolve_output_dir()
        stamp = self.clock().strftime("%Y%m%d_%H%M%S")
        return folder / f"Extrato_{stamp}.{statement_format.value}"

    def save(self, content: str, statement_format: StatementFormat) -> Path:
        """Persist ``content`` and return the written path.

        Existing statements are never overwritten: when the timestamped name
        is taken, ``_2``, ``_3``, ... is appended to the stem.
        """

        destination = self.destination_for(statement_format)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination = _write_new_file(destination, content)
        except OSError as exc:
            LOGGER.error("Falha ao gravar extrato em %s: %s", destination, exc)
            raise PersistenceError(
                f"Erro ao salvar arquivo de extrato em '{destination}': {exc}",
                content=content,
                path=destination,
            ) from exc

        LOGGER.info("Extrato gravado em %s", destination)
        return destination


def _write_new_file(destination: Path, content: str) -> Path:
    candidate = destination
    counter = 1
    while True:
        try:
            with candidate.open("x", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except FileExistsError:
            counter += 1
            candidate = destination.with_name(
                f"{destination.stem}_{counter}{destination.suffix}"
            )
            continue
        return candidate


__all__ = ["Clock", "StatementStorage"]
