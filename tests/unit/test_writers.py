"""Unit tests for report rendering.

Each test has a single assertion and focuses on behavior.
"""

import io

import pytest

from markerscan.processing import FileScanResult, RegionResult, ScanReport
from markerscan.reports import format_text_report, write_report_to_stream

# pylint: disable=missing-function-docstring


def _report(content: str | None = "x") -> ScanReport:
    return ScanReport(
        start_marker="{{",
        end_marker="}}",
        files=[
            FileScanResult(
                path="page.html",
                regions=[RegionResult(start=0, end=3, content=content)],
            )
        ],
    )


class TestFormatTextReport:
    """Test the one-line-per-region text format."""

    def test_renders_path_range_and_content(self) -> None:
        assert format_text_report(_report()) == "page.html:0-3: x\n"

    def test_omits_missing_content(self) -> None:
        assert format_text_report(_report(None)) == "page.html:0-3\n"

    def test_escapes_newlines_in_content(self) -> None:
        assert format_text_report(_report("a\nb")) == "page.html:0-3: a\\nb\n"

    def test_shortens_long_content(self) -> None:
        line = format_text_report(_report("y" * 200)).rstrip("\n")
        assert line.endswith("y...")

    def test_empty_report_renders_nothing(self) -> None:
        report = ScanReport(start_marker="{{", end_marker="}}")
        assert format_text_report(report) == ""


class TestWriteReportToStream:
    """Test structured formats."""

    def test_json_contains_regions(self) -> None:
        stream = io.StringIO()
        write_report_to_stream(_report(), stream, "json")
        assert '"content": "x"' in stream.getvalue()

    def test_yaml_contains_markers(self) -> None:
        stream = io.StringIO()
        write_report_to_stream(_report(), stream, "yaml")
        assert "start_marker: '{{'" in stream.getvalue()

    def test_unknown_format_raises(self) -> None:
        with pytest.raises(ValueError):
            write_report_to_stream(_report(), io.StringIO(), "xml")
