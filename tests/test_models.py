from __future__ import annotations

import pytest

from extratos.models import Invoice, Performance, Play


def test_negative_audience_is_rejected():
    with pytest.raises(ValueError):
        Performance("as-like", -5)


def test_negative_line_count_is_rejected():
    with pytest.raises(ValueError):
        Play("As You Like It", "comedy", -1)


def test_zero_values_are_accepted():
    assert Performance("hamlet", 0).audience == 0
    assert Play("Hamlet", "tragedy", 0).line_count == 0


def test_invoice_stores_performances_as_tuple():
    invoice = Invoice("BigCo", [Performance("hamlet", 55)])

    assert invoice.performances == (Performance("hamlet", 55),)
