"""Plain text statement renderer."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..models import StatementData

AMT2 = Decimal("0.01")
CURRENCY_SYMBOL = "$"


def format_currency(value: Decimal) -> str:
    """Format ``value`` as en-US currency, e.g. ``$1,653.00``."""

    amount = Decimal(value).quantize(AMT2, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def render_text(data: StatementData) -> str:
    lines = [f"Statement for {data.customer}"]
    for detail in data.details:
        lines.append(
            f"  {detail.play_name}: {format_currency(detail.amount_owed)} "
            f"({detail.seats} seats)"
        )
    lines.append(f"Amount owed is {format_currency(data.totals.total_amount)}")
    lines.append(f"You earned {data.totals.total_credits} credits")
    return "".join(f"{line}\n" for line in lines)


__all__ = ["format_currency", "render_text"]
