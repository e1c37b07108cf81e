"""Exception taxonomy shared by every stage of statement production."""

from __future__ import annotations

from pathlib import Path


class StatementError(Exception):
    """Base class for failures raised while producing a statement."""

    code = "STATEMENT_ERROR"


class UnsupportedFormatError(StatementError, ValueError):
    """Raised when the requested output format is not supported."""

    code = "UNSUPPORTED_FORMAT"

    def __init__(self, value: object) -> None:
        super().__init__(f"Formato do extrato não suportado: {value!r}")
        self.value = value


class AggregationError(StatementError):
    """Raised when the per-performance pass cannot complete."""

    code = "AGGREGATION_FAILED"


class UnknownPlayError(AggregationError):
    """Raised when an invoice references a play missing from the catalogue."""

    code = "UNKNOWN_PLAY"

    def __init__(self, play_id: str) -> None:
        super().__init__(f"Peça desconhecida: {play_id!r}")
        self.play_id = play_id


class UnsupportedGenreError(AggregationError, ValueError):
    """Raised when a play genre has no pricing rule."""

    code = "UNSUPPORTED_GENRE"

    def __init__(self, genre: object) -> None:
        super().__init__(f"Género de peça não suportado: {genre!r}")
        self.genre = genre


class RenderError(StatementError):
    """Raised when statement data cannot be written in the requested format."""

    code = "RENDER_FAILED"


class PersistenceError(StatementError):
    """Raised when the rendered statement cannot be written to storage.

    The rendered document is kept in :attr:`content` so that callers can
    still use it after the write failed.
    """

    code = "PERSISTENCE_FAILED"

    def __init__(self, message: str, *, content: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.content = content
        self.path = path


class InputLoaderError(StatementError):
    """Raised when an invoice or play catalogue file cannot be parsed."""

    code = "INVALID_INPUT"


__all__ = [
    "AggregationError",
    "InputLoaderError",
    "PersistenceError",
    "RenderError",
    "StatementError",
    "UnknownPlayError",
    "UnsupportedFormatError",
    "UnsupportedGenreError",
]
