from __future__ import annotations

from decimal import Decimal

import pytest
from lxml import etree

from extratos.aggregation import aggregate
from extratos.models import Invoice, Performance, Play, StatementData
from extratos.renderers import format_currency, format_xml_amount, render_text, render_xml
from extratos.renderers.xml_document import XSD_NAMESPACE, XSI_NAMESPACE


def _parse(xml: str) -> etree._Element:
    return etree.fromstring(xml.encode("utf-8"))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("0"), "$0.00"),
        (Decimal("650"), "$650.00"),
        (Decimal("123.4"), "$123.40"),
        (Decimal("1653"), "$1,653.00"),
        (Decimal("1234567.891"), "$1,234,567.89"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Decimal("20"), "20"),
        (Decimal("20.00"), "20"),
        (Decimal("30.5"), "30.5"),
        (Decimal("30.55"), "30.6"),
        (Decimal("123.40"), "123.4"),
    ],
)
def test_format_xml_amount(value, expected):
    assert format_xml_amount(value) == expected


def test_render_text_statement(invoice, plays):
    text = render_text(aggregate(invoice, plays))

    assert text == (
        "Statement for BigCo\n"
        "  Hamlet: $650.00 (55 seats)\n"
        "  As You Like It: $547.00 (35 seats)\n"
        "  Othello: $456.00 (40 seats)\n"
        "Amount owed is $1,653.00\n"
        "You earned 47 credits\n"
    )


def test_render_text_empty_statement():
    text = render_text(StatementData(customer="Nobody"))

    assert text == (
        "Statement for Nobody\n"
        "Amount owed is $0.00\n"
        "You earned 0 credits\n"
    )


def test_render_xml_structure(invoice, plays):
    xml = render_xml(aggregate(invoice, plays))

    assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>\n')
    root = _parse(xml)
    assert root.tag == "Statement"
    assert root.nsmap == {"xsi": XSI_NAMESPACE, "xsd": XSD_NAMESPACE}
    assert [child.tag for child in root] == [
        "Customer",
        "Items",
        "AmountOwed",
        "EarnedCredits",
    ]
    assert root.findtext("Customer") == "BigCo"

    items = root.findall("./Items/Item")
    assert len(items) == 3
    assert [child.tag for child in items[0]] == ["AmountOwed", "EarnedCredits", "Seats"]
    assert items[0].findtext("AmountOwed") == "650"
    assert items[0].findtext("EarnedCredits") == "25"
    assert items[0].findtext("Seats") == "55"

    assert root.findtext("AmountOwed") == "1653"
    assert root.findtext("EarnedCredits") == "47"


def test_render_xml_fractional_amounts():
    plays = {"short": Play("Short Play", "tragedy", 1234)}
    data = aggregate(Invoice("Tiny", [Performance("short", 10)]), plays)

    root = _parse(render_xml(data))

    assert root.findtext("./Items/Item/AmountOwed") == "123.4"
    assert root.findtext("AmountOwed") == "123.4"


def test_render_xml_empty_statement():
    root = _parse(render_xml(StatementData(customer="Nobody")))

    assert root.findtext("Customer") == "Nobody"
    assert len(root.find("Items")) == 0
    assert root.findtext("AmountOwed") == "0"
    assert root.findtext("EarnedCredits") == "0"


def test_render_xml_is_deterministic(invoice, plays):
    data = aggregate(invoice, plays)

    assert render_xml(data).encode("utf-8") == render_xml(data).encode("utf-8")


def test_render_xml_keeps_non_ascii_customer():
    root = _parse(render_xml(StatementData(customer="Companhia São João")))

    assert root.findtext("Customer") == "Companhia São João"
