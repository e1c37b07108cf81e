"""Data structures describing invoices, plays and computed statements."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping

from .errors import UnsupportedFormatError, UnsupportedGenreError


class Genre(str, Enum):
    """Category of a play, driving its pricing curve."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"
    HISTORY = "history"

    @classmethod
    def parse(cls, value: Genre | str) -> Genre:
        """Return the member matching ``value`` by name or value."""

        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower()):
                return member
        raise UnsupportedGenreError(value)


class StatementFormat(str, Enum):
    """Output representations supported for a statement.

    The value is also the extension used when the statement is saved.
    """

    TXT = "txt"
    XML = "xml"

    @classmethod
    def parse(cls, value: StatementFormat | str) -> StatementFormat:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text == member.value:
                    return member
        raise UnsupportedFormatError(value)


@dataclass(frozen=True)
class Play:
    """Reference data for a play, looked up by identifier."""

    name: str
    genre: Genre | str
    line_count: int

    def __post_init__(self) -> None:
        if self.line_count < 0:
            raise ValueError(f"Quantidade de linhas inválida para {self.name!r}: {self.line_count}")


@dataclass(frozen=True)
class Performance:
    """One invoice line: a play performed for an audience."""

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError(f"Audiência inválida para {self.play_id!r}: {self.audience}")


@dataclass(frozen=True)
class Invoice:
    """Customer invoice listing the performances to bill."""

    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable copy.
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class PerformanceDetail:
    """Computed values for a single performance."""

    play_name: str
    amount_owed: Decimal
    earned_credits: int
    seats: int


@dataclass(frozen=True)
class StatementTotals:
    total_amount: Decimal = Decimal("0")
    total_credits: int = 0


@dataclass(frozen=True)
class StatementData:
    """Aggregated statement shared by every renderer."""

    customer: str
    details: tuple[PerformanceDetail, ...] = ()
    totals: StatementTotals = field(default_factory=StatementTotals)


PlayCatalogue = Mapping[str, Play]


__all__ = [
    "Genre",
    "Invoice",
    "Performance",
    "PerformanceDetail",
    "Play",
    "PlayCatalogue",
    "StatementData",
    "StatementFormat",
    "StatementTotals",
]
