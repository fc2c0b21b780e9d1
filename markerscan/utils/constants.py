"""Shared constants for MarkerScan."""


class Constants:
    """Project-wide constant values."""

    DEFAULT_START_MARKER = "{{"
    DEFAULT_END_MARKER = "}}"

    # Text report line: <path>:<start>-<end>: <content>
    TEXT_REPORT_SEPARATOR = ": "
    TEXT_REPORT_RANGE_SEPARATOR = "-"

    # Long region contents are shortened in text reports
    TEXT_REPORT_MAX_CONTENT = 80
    TEXT_REPORT_ELLIPSIS = "..."
