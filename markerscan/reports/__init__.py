"""Report generation for MarkerScan."""

from markerscan.reports.writers import format_text_report, write_report, write_report_to_stream

__all__ = ["format_text_report", "write_report", "write_report_to_stream"]
