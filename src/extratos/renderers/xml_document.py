"""XML statement renderer.

The document layout::

    <Statement xmlns:xsi=... xmlns:xsd=...>
      <Customer/>
      <Items>
        <Item><AmountOwed/><EarnedCredits/><Seats/></Item>
      </Items>
      <AmountOwed/>
      <EarnedCredits/>
    </Statement>

``AmountOwed`` values are written without a decimal point when they are whole
numbers and with a single decimal digit otherwise.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from lxml import etree

from ..errors import RenderError
from ..models import StatementData

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
AMT1 = Decimal("0.1")


def format_xml_amount(value: Decimal) -> str:
    """Return ``20`` for ``20.00`` and ``30.5`` for ``30.50``."""

    amount = Decimal(value)
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount.quantize(AMT1, rounding=ROUND_HALF_UP):.1f}"


def _append(parent: etree._Element, tag: str, text: object) -> etree._Element:
    child = etree.SubElement(parent, tag)
    try:
        child.text = str(text)
    except ValueError as exc:
        raise RenderError(f"Valor inválido para <{tag}> no extrato XML: {text!r}") from exc
    return child


def build_statement_element(data: StatementData) -> etree._Element:
    """Return the ``Statement`` root element for ``data``."""

    root = etree.Element(
        "Statement", nsmap={"xsi": XSI_NAMESPACE, "xsd": XSD_NAMESPACE}
    )
    _append(root, "Customer", data.customer)

    items = etree.SubElement(root, "Items")
    for detail in data.details:
        item = etree.SubElement(items, "Item")
        _append(item, "AmountOwed", format_xml_amount(detail.amount_owed))
        _append(item, "EarnedCredits", detail.earned_credits)
        _append(item, "Seats", detail.seats)

    _append(root, "AmountOwed", format_xml_amount(data.totals.total_amount))
    _append(root, "EarnedCredits", data.totals.total_credits)
    return root


def render_xml(data: StatementData) -> str:
    """Serialise ``data`` as an XML document declared as UTF-8."""

    root = build_statement_element(data)
    body = etree.tostring(root, encoding="unicode", pretty_print=True)
    return f"{XML_DECLARATION}\n{body.rstrip()}"


__all__ = ["build_statement_element", "format_xml_amount", "render_xml"]
