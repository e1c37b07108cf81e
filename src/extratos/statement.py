"""Statement production: aggregation, rendering and XML persistence."""

from __future__ import annotations

import logging
from typing import Callable

from .aggregation import aggregate
from .models import Invoice, PlayCatalogue, StatementData, StatementFormat
from .pricing import DEFAULT_ENGINE, PricingEngine
from .renderers import render_text, render_xml
from .storage import StatementStorage

LOGGER = logging.getLogger("extratos.statement")

Renderer = Callable[[StatementData], str]

_RENDERERS: dict[StatementFormat, Renderer] = {
    StatementFormat.TXT: render_text,
    StatementFormat.XML: render_xml,
}

# Only these formats are written to disk after rendering.
_PERSISTED_FORMATS = frozenset({StatementFormat.XML})


class StatementPrinter:
    """Produce statements in any supported :class:`StatementFormat`.

    XML statements are also saved through ``storage``; a failed write raises
    :class:`~extratos.errors.PersistenceError` and the whole call fails, the
    rendered document travelling on the exception.
    """

    def __init__(
        self,
        engine: PricingEngine | None = None,
        storage: StatementStorage | None = None,
    ) -> None:
        self.engine = engine or DEFAULT_ENGINE
        self.storage = storage or StatementStorage()

    def produce_statement(
        self,
        invoice: Invoice,
        plays: PlayCatalogue,
        statement_format: StatementFormat | str,
    ) -> str:
        resolved = StatementFormat.parse(statement_format)
        data = aggregate(invoice, plays, self.engine)
        content = _RENDERERS[resolved](data)
        LOGGER.info(
            "Extrato %s gerado para %s (%d apresentações)",
            resolved.value.upper(),
            invoice.customer,
            len(data.details),
        )

        if resolved in _PERSISTED_FORMATS:
            self.storage.save(content, resolved)
        return content


def produce_statement(
    invoice: Invoice,
    plays: PlayCatalogue,
    statement_format: StatementFormat | str,
) -> str:
    """Render ``invoice`` with a default :class:`StatementPrinter`."""

    return StatementPrinter().produce_statement(invoice, plays, statement_format)


__all__ = ["StatementPrinter", "produce_statement"]
