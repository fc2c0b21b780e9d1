"""Markup escaping and envelope helpers for embedding text in XML/HTML output."""

CDATA_START = "<![CDATA["
CDATA_END = "]]>"
HTML_START = "<html>"
BODY_START = "<body>"
HTML_END = "</html>"
BODY_END = "</body>"

_ALWAYS_ESCAPED = {
    '"': "&quot;",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}
_WHITESPACE_ESCAPED = {
    "\n": "&#10;",
    "\r": "&#13;",
    "\t": "&#9;",
}
_NO_BREAK_SPACE = "\u00a0"


def _entity_for(ch: str, escape_white_space: bool, convert_no_break_space: bool) -> str | None:
    if ch in _ALWAYS_ESCAPED:
        return _ALWAYS_ESCAPED[ch]
    if escape_white_space and ch in _WHITESPACE_ESCAPED:
        return _WHITESPACE_ESCAPED[ch]
    if convert_no_break_space and ch == _NO_BREAK_SPACE:
        return "&nbsp;"
    return None


def escape_string(
    text: str | None, escape_white_space: bool = False, convert_no_break_space: bool = True
) -> str | None:
    """Replace markup-significant characters with entities.

    Quotes, angle brackets and ampersands are always escaped. Newline,
    carriage return and tab become numeric entities only with
    escape_white_space; U+00A0 becomes ``&nbsp;`` unless disabled.

    Args:
        text: Text to escape, or None
        escape_white_space: Escape \\n, \\r and \\t
        convert_no_break_space: Escape the no-break space

    Returns:
        Escaped text, the same object when nothing needed escaping, or None
    """
    if text is None:
        return None

    parts: list[str] | None = None
    for i, ch in enumerate(text):
        entity = _entity_for(ch, escape_white_space, convert_no_break_space)
        if parts is None:
            if entity is not None:
                parts = [text[:i], entity]
        else:
            parts.append(ch if entity is None else entity)

    return text if parts is None else "".join(parts)


def wrap_in_cdata(text: str) -> str:
    """Wrap text in CDATA sections, splitting around any embedded ``]]>``."""
    parts: list[str] = []
    cur = 0
    length = len(text)
    while cur < length:
        nxt = text.find(CDATA_END, cur)
        if nxt < 0:
            nxt = length
        parts.append(CDATA_START + text[cur:nxt] + CDATA_END)
        if nxt < length:
            parts.append(escape_string(CDATA_END))
        cur = nxt + len(CDATA_END)
    return "".join(parts)


def wrap_in_html(text: str) -> str:
    return HTML_START + text + HTML_END


def is_wrapped_in_html(text: str) -> bool:
    """Check for the html envelope, ignoring case."""
    lowered = text.lower()
    return lowered.startswith(HTML_START) and lowered.endswith(HTML_END)


def strip_html(text: str) -> str:
    """Remove leading <html>/<body> and trailing </html>/</body> tags."""
    text = text.removeprefix(HTML_START)
    text = text.removeprefix(BODY_START)
    text = text.removesuffix(HTML_END)
    text = text.removesuffix(BODY_END)
    return text
