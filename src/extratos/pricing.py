"""Pricing rules for theatrical performances.

Prices are computed in *base units* (cents) and only converted to currency
at the end of :meth:`PricingEngine.amount_owed`:

- Tragedy: ``base``, plus ``1000`` per spectator above 30.
- Comedy: ``base + 300 * audience``; above 20 spectators add ``10000``
  plus ``500`` per spectator over 20.
- History: the tragedy amount plus the comedy amount for the same base.

The base amount is ``normalize_lines(line_count) * 10``. The line
normalisation is a pluggable strategy; the default clamps the line count to
``[MIN_LINES, MAX_LINES]``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from .models import Genre

MIN_LINES = 1000
MAX_LINES = 4000
LINE_PRICE = 10
CENTS = Decimal("100")

TRAGEDY_AUDIENCE_THRESHOLD = 30
COMEDY_AUDIENCE_THRESHOLD = 20
CREDITS_AUDIENCE_THRESHOLD = 30
COMEDY_CREDITS_DIVISOR = 5

LineNormalizer = Callable[[int], int]


def clamp_lines(line_count: int) -> int:
    """Clamp ``line_count`` into ``[MIN_LINES, MAX_LINES]``."""

    if line_count < 0:
        raise ValueError(f"Quantidade de linhas inválida: {line_count}")
    return min(max(line_count, MIN_LINES), MAX_LINES)


def _tragedy_amount(audience: int, base: Decimal) -> Decimal:
    amount = base
    if audience > TRAGEDY_AUDIENCE_THRESHOLD:
        amount += 1000 * (audience - TRAGEDY_AUDIENCE_THRESHOLD)
    return amount


def _comedy_amount(audience: int, base: Decimal) -> Decimal:
    amount = base
    if audience > COMEDY_AUDIENCE_THRESHOLD:
        amount += 10000 + 500 * (audience - COMEDY_AUDIENCE_THRESHOLD)
    amount += 300 * audience
    return amount


def _history_amount(audience: int, base: Decimal) -> Decimal:
    return _tragedy_amount(audience, base) + _comedy_amount(audience, base)


_AMOUNT_RULES: dict[Genre, Callable[[int, Decimal], Decimal]] = {
    Genre.TRAGEDY: _tragedy_amount,
    Genre.COMEDY: _comedy_amount,
    Genre.HISTORY: _history_amount,
}


class PricingEngine:
    """Compute base prices, amounts owed and credits per performance."""

    def __init__(self, normalize_lines: LineNormalizer = clamp_lines) -> None:
        self.normalize_lines = normalize_lines

    def base_price(self, line_count: int) -> Decimal:
        """Return the base amount, in base units, for ``line_count`` lines."""

        return Decimal(self.normalize_lines(line_count) * LINE_PRICE)

    def amount_owed(self, genre: Genre | str, audience: int, base_amount: Decimal) -> Decimal:
        """Return the currency amount owed for one performance."""

        rule = _AMOUNT_RULES[Genre.parse(genre)]
        return rule(audience, Decimal(base_amount)) / CENTS

    def earned_credits(self, genre: Genre | str, audience: int) -> int:
        """Return the loyalty credits earned by one performance."""

        resolved = Genre.parse(genre)
        credits = max(audience - CREDITS_AUDIENCE_THRESHOLD, 0)
        if resolved is Genre.COMEDY:
            credits += audience // COMEDY_CREDITS_DIVISOR
        return credits


DEFAULT_ENGINE = PricingEngine()


def base_price(line_count: int) -> Decimal:
    return DEFAULT_ENGINE.base_price(line_count)


def amount_owed(genre: Genre | str, audience: int, base_amount: Decimal) -> Decimal:
    return DEFAULT_ENGINE.amount_owed(genre, audience, base_amount)


def earned_credits(genre: Genre | str, audience: int) -> int:
    return DEFAULT_ENGINE.earned_credits(genre, audience)


__all__ = [
    "DEFAULT_ENGINE",
    "LineNormalizer",
    "MAX_LINES",
    "MIN_LINES",
    "PricingEngine",
    "amount_owed",
    "base_price",
    "clamp_lines",
    "earned_credits",
]
