"""Marker classification for nesting scans."""

from markerscan.core.types import MarkerKind


def define_short_symbol(marker: str) -> str | None:
    """Return the repeated character of a short marker.

    A marker is short when it is exactly two identical characters, e.g. ``{{``.

    Args:
        marker: Non-empty marker string

    Returns:
        The repeated character, or None for any other marker
    """
    if len(marker) == 2 and marker[0] == marker[1]:
        return marker[0]
    return None


def classify_marker(marker: str) -> MarkerKind:
    """Classify a marker as SHORT or LONG."""
    if define_short_symbol(marker) is None:
        return MarkerKind.LONG
    return MarkerKind.SHORT


def scan_char(marker: str) -> str:
    """Character the short-symbol strategy counts for this marker.

    Short markers count their repeated character; any other marker falls back
    to its first character.
    """
    short_symbol = define_short_symbol(marker)
    return marker[0] if short_symbol is None else short_symbol
