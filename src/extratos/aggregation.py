"""Single pass over an invoice computing per-performance details and totals."""

from __future__ import annotations

import logging
from decimal import Decimal

from .errors import AggregationError, UnknownPlayError
from .models import (
    Invoice,
    PerformanceDetail,
    PlayCatalogue,
    StatementData,
    StatementTotals,
)
from .pricing import DEFAULT_ENGINE, PricingEngine

LOGGER = logging.getLogger("extratos.aggregation")


def aggregate(
    invoice: Invoice,
    plays: PlayCatalogue,
    engine: PricingEngine | None = None,
) -> StatementData:
    """Compute the statement data for ``invoice``.

    Performances are processed in invoice order and the resulting details keep
    that order. The first failure aborts the whole pass: tagged errors such as
    :class:`UnknownPlayError` propagate unchanged, anything else is wrapped in
    :class:`AggregationError`.
    """

    engine = engine or DEFAULT_ENGINE
    total_amount = Decimal("0")
    total_credits = 0
    details: list[PerformanceDetail] = []

    for index, performance in enumerate(invoice.performances):
        try:
            play = plays.get(performance.play_id)
            if play is None:
                raise UnknownPlayError(performance.play_id)

            base = engine.base_price(play.line_count)
            amount = engine.amount_owed(play.genre, performance.audience, base)
            credits = engine.earned_credits(play.genre, performance.audience)
        except AggregationError:
            raise
        except Exception as exc:
            raise AggregationError(
                f"Erro ao gerar detalhes da apresentação #{index + 1} "
                f"({performance.play_id!r}): {exc}"
            ) from exc

        LOGGER.debug(
            "Apresentação %s: %s, valor %s, %s créditos",
            index + 1,
            play.name,
            amount,
            credits,
        )
        details.append(
            PerformanceDetail(
                play_name=play.name,
                amount_owed=amount,
                earned_credits=credits,
                seats=performance.audience,
            )
        )
        total_amount += amount
        total_credits += credits

    return StatementData(
        customer=invoice.customer,
        details=tuple(details),
        totals=StatementTotals(total_amount=total_amount, total_credits=total_credits),
    )


__all__ = ["aggregate"]
