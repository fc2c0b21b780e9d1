"""Unit tests for markup escaping and envelope helpers.

Each test has a single assertion and focuses on behavior.
"""

from markerscan.markup import (
    escape_string,
    is_wrapped_in_html,
    strip_html,
    wrap_in_cdata,
    wrap_in_html,
)

# pylint: disable=missing-function-docstring


class TestEscapeString:
    """Test entity escaping."""

    def test_escapes_markup_characters(self) -> None:
        assert escape_string('"<>&') == "&quot;&lt;&gt;&amp;"

    def test_keeps_surrounding_text(self) -> None:
        assert escape_string("a<b") == "a&lt;b"

    def test_returns_clean_string_unchanged(self) -> None:
        text = "nothing to escape"
        assert escape_string(text) is text

    def test_none_passes_through(self) -> None:
        assert escape_string(None) is None

    def test_keeps_whitespace_by_default(self) -> None:
        assert escape_string("a\n\tb") == "a\n\tb"

    def test_escapes_whitespace_when_requested(self) -> None:
        assert escape_string("a\n\r\tb", escape_white_space=True) == "a&#10;&#13;&#9;b"

    def test_converts_no_break_space(self) -> None:
        assert escape_string("a\u00a0b") == "a&nbsp;b"

    def test_keeps_no_break_space_when_disabled(self) -> None:
        assert escape_string("a\u00a0b", convert_no_break_space=False) == "a\u00a0b"


class TestWrapInCdata:
    """Test CDATA wrapping."""

    def test_wraps_plain_text(self) -> None:
        assert wrap_in_cdata("abc") == "<![CDATA[abc]]>"

    def test_splits_around_terminator(self) -> None:
        assert wrap_in_cdata("a]]>b") == "<![CDATA[a]]>]]&gt;<![CDATA[b]]>"

    def test_trailing_terminator(self) -> None:
        assert wrap_in_cdata("]]>") == "<![CDATA[]]>]]&gt;"

    def test_empty_text_produces_nothing(self) -> None:
        assert wrap_in_cdata("") == ""


class TestHtmlEnvelope:
    """Test <html> wrapping and stripping."""

    def test_wrap_in_html(self) -> None:
        assert wrap_in_html("x") == "<html>x</html>"

    def test_detects_wrapping_ignoring_case(self) -> None:
        assert is_wrapped_in_html("<HTML>x</HTML>") is True

    def test_rejects_missing_end_tag(self) -> None:
        assert is_wrapped_in_html("<html>x") is False

    def test_strips_html_and_body(self) -> None:
        assert strip_html("<html><body>x</body></html>") == "x"

    def test_strip_leaves_bare_text(self) -> None:
        assert strip_html("x") == "x"
