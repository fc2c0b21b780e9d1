"""Report writers for text, YAML and JSON output."""

import json
import sys
from typing import TYPE_CHECKING, TextIO

from loguru import logger
import yaml

from markerscan.utils import Constants, write_file_safely

if TYPE_CHECKING:
    from markerscan.processing.data_models import ScanReport


def _shorten(content: str) -> str:
    limit = Constants.TEXT_REPORT_MAX_CONTENT
    if len(content) <= limit:
        return content
    return content[: limit - len(Constants.TEXT_REPORT_ELLIPSIS)] + Constants.TEXT_REPORT_ELLIPSIS


def format_text_report(report: "ScanReport") -> str:
    """Render one line per region: ``path:start-end: content``."""
    lines = []
    for file_result in report.files:
        for region in file_result.regions:
            line = (
                f"{file_result.path}:{region.start}"
                f"{Constants.TEXT_REPORT_RANGE_SEPARATOR}{region.end}"
            )
            if region.content is not None:
                # Keep one region per line
                content = _shorten(region.content.replace("\n", "\\n"))
                line += Constants.TEXT_REPORT_SEPARATOR + content
            lines.append(line)
    return "\n".join(lines) + ("\n" if lines else "")


def write_report_to_stream(report: "ScanReport", stream: TextIO, output_format: str) -> None:
    """Write the report to a stream (file or stdout).

    Args:
        report: Report to write
        stream: Output stream
        output_format: One of "text", "yaml" or "json"

    Raises:
        ValueError: If output_format is unknown
        yaml.YAMLError: If YAML serialization fails
    """
    if output_format == "text":
        stream.write(format_text_report(report))
        return

    data = report.model_dump(exclude={"elapsed_time"})
    if output_format == "json":
        json.dump(data, stream, ensure_ascii=False, indent=2)
        stream.write("\n")
        return
    if output_format == "yaml":
        try:
            yaml.safe_dump(
                data,
                stream,
                allow_unicode=True,
                default_flow_style=False,
                sort_keys=False,
                width=float("inf"),
            )
        except yaml.YAMLError as e:
            logger.error(f"✗ YAML serialization error writing report: {e}")
            raise
        return

    raise ValueError(f"Unknown report format: {output_format}")


def write_report(report: "ScanReport", output: str | None, output_format: str) -> None:
    """Write the report to a file, or stdout when output is None."""
    if output is None:
        write_report_to_stream(report, sys.stdout, output_format)
        return

    write_file_safely(
        output,
        lambda f: write_report_to_stream(report, f, output_format),
        "writing report",
    )
    logger.info(f"  Report written to {output}")
