"""Load invoices and play catalogues from JSON files.

Expected layouts::

    # plays.json
    {"hamlet": {"name": "Hamlet", "type": "tragedy", "lines": 4024}}

    # invoice.json
    {"customer": "BigCo", "performances": [{"playID": "hamlet", "audience": 55}]}

Genres are kept verbatim so that an unsupported one is reported when the
statement is priced.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import InputLoaderError
from .models import Invoice, Performance, Play


def _read_json(path: Path) -> Any:
    if not path.exists():
        msg = f"Ficheiro '{path}' não encontrado"
        raise InputLoaderError(msg)

    with path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as exc:
            msg = f"Ficheiro '{path}' não contém JSON válido"
            raise InputLoaderError(msg) from exc


def _non_negative_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"Campo '{field}' deve ser um inteiro não negativo: {value!r}"
        raise InputLoaderError(msg)
    return value


def parse_plays(payload: Any) -> dict[str, Play]:
    """Convert a decoded JSON object into a play catalogue."""

    if not isinstance(payload, dict):
        raise InputLoaderError("Catálogo de peças deve ser um objecto JSON")

    plays: dict[str, Play] = {}
    for play_id, item in payload.items():
        try:
            plays[play_id] = Play(
                name=item["name"],
                genre=item["type"],
                line_count=_non_negative_int(item["lines"], f"{play_id}.lines"),
            )
        except (KeyError, TypeError) as exc:
            msg = f"Peça '{play_id}' sem os campos obrigatórios (name, type, lines)"
            raise InputLoaderError(msg) from exc
    return plays


def parse_invoice(payload: Any) -> Invoice:
    """Convert a decoded JSON object into an :class:`Invoice`."""

    try:
        customer = payload["customer"]
        raw_performances = payload["performances"]
    except (KeyError, TypeError) as exc:
        msg = "Fatura sem os campos obrigatórios (customer, performances)"
        raise InputLoaderError(msg) from exc
    if not isinstance(raw_performances, list):
        raise InputLoaderError("Campo 'performances' deve ser uma lista")

    performances = []
    for position, item in enumerate(raw_performances, start=1):
        try:
            play_id = item["playID"]
            audience = item["audience"]
        except (KeyError, TypeError) as exc:
            msg = f"Apresentação #{position} sem os campos obrigatórios (playID, audience)"
            raise InputLoaderError(msg) from exc
        performances.append(
            Performance(
                play_id=play_id,
                audience=_non_negative_int(audience, f"performances[{position}].audience"),
            )
        )

    return Invoice(customer=customer, performances=tuple(performances))


def load_plays(path: Path) -> dict[str, Play]:
    return parse_plays(_read_json(Path(path)))


def load_invoice(path: Path) -> Invoice:
    return parse_invoice(_read_json(Path(path)))


def load_invoices(path: Path) -> list[Invoice]:
    """Load one invoice object or a list of invoices from ``path``."""

    payload = _read_json(Path(path))
    if isinstance(payload, list):
        return [parse_invoice(item) for item in payload]
    return [parse_invoice(payload)]


__all__ = [
    "load_invoice",
    "load_invoices",
    "load_plays",
    "parse_invoice",
    "parse_plays",
]
