"""Renderers turning :class:`~extratos.models.StatementData` into documents."""

from .plain_text import format_currency, render_text
from .xml_document import format_xml_amount, render_xml

__all__ = ["format_currency", "format_xml_amount", "render_text", "render_xml"]
