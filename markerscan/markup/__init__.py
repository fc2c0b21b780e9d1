"""Markup escaping helpers."""

from markerscan.markup.escaping import (
    BODY_END,
    BODY_START,
    CDATA_END,
    CDATA_START,
    HTML_END,
    HTML_START,
    escape_string,
    is_wrapped_in_html,
    strip_html,
    wrap_in_cdata,
    wrap_in_html,
)

__all__ = [
    "BODY_END",
    "BODY_START",
    "CDATA_END",
    "CDATA_START",
    "HTML_END",
    "HTML_START",
    "escape_string",
    "is_wrapped_in_html",
    "strip_html",
    "wrap_in_cdata",
    "wrap_in_html",
]
