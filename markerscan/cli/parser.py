"""Command-line interface for the MarkerScan project."""

import argparse

from markerscan.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="markerscan",
        description="Find top-level regions delimited by nested start/end markers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report every top-level {{ ... }} region in a template
  %(prog)s templates/page.html

  # Custom markers, YAML report written to a file
  %(prog)s --start-marker '<%%' --end-marker '%%>' --format yaml -o report.yml page.jsp

  # Escape region contents for embedding in markup
  %(prog)s --escape --format json templates/*.html

  # Using JSON config
  %(prog)s --config config.json

Example config.json:
{
  "start_marker": "{{",
  "end_marker": "}}",
  "inputs": ["templates/page.html"],
  "output_format": "yaml",
  "output": "reports/regions.yml",
  "escape": false,
  "include_content": true,
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    parser.add_argument("inputs", nargs="*", default=[], help="Files to scan")

    # Markers
    parser.add_argument(
        "--start-marker",
        type=str,
        default=Constants.DEFAULT_START_MARKER,
        help=f"Opening marker (default: {Constants.DEFAULT_START_MARKER})",
    )
    parser.add_argument(
        "--end-marker",
        type=str,
        default=Constants.DEFAULT_END_MARKER,
        help=f"End marker (default: {Constants.DEFAULT_END_MARKER})",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Report file (default: stdout)")
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        choices=["text", "yaml", "json"],
        default="text",
        help="Report format",
    )
    parser.add_argument(
        "--escape",
        action="store_true",
        help="Escape region contents as markup entities",
    )
    parser.add_argument(
        "--no-content",
        dest="include_content",
        action="store_false",
        help="Report region positions only",
    )

    parser.add_argument("--log-file", type=str, help="Also write logs to this file")

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")

    return parser
