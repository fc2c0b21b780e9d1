"""Scan a whole text for top-level marked regions."""

from collections.abc import Iterator

from loguru import logger

from markerscan.core.matching_end import find_matching_end
from markerscan.core.types import NOT_FOUND, MarkedRegion


def iter_marked_regions(
    text: str, start_marker: str, end_marker: str, start: int = 0
) -> Iterator[MarkedRegion]:
    """Yield every top-level region delimited by start_marker/end_marker.

    Nested regions are part of their enclosing region's content and are not
    yielded separately. Scanning stops at the first opening marker that has
    no matching end marker.

    Args:
        text: Text to scan
        start_marker: Opening marker
        end_marker: End marker
        start: Index to start scanning from; a negative index yields nothing

    Yields:
        MarkedRegion for each balanced top-level region, in text order
    """
    if not start_marker or not end_marker:
        raise ValueError("start and end markers must be non-empty")

    if start < 0:
        return

    cursor = start
    while True:
        open_idx = text.find(start_marker, cursor)
        if open_idx == NOT_FOUND:
            return
        end_idx = find_matching_end(start_marker, end_marker, text, open_idx + len(start_marker))
        if end_idx == NOT_FOUND:
            logger.debug(f"  Unterminated {start_marker!r} at index {open_idx}")
            return
        region = MarkedRegion(open_idx, end_idx, start_marker, end_marker)
        yield region
        cursor = region.stop


def find_marked_regions(
    text: str, start_marker: str, end_marker: str, start: int = 0
) -> list[MarkedRegion]:
    """Return all top-level marked regions as a list."""
    return list(iter_marked_regions(text, start_marker, end_marker, start))


def has_unterminated_region(
    text: str,
    start_marker: str,
    end_marker: str,
    regions: list[MarkedRegion] | None = None,
) -> bool:
    """Check whether scanning stops on an opening marker with no matching end.

    Args:
        text: Text to scan
        start_marker: Opening marker
        end_marker: End marker
        regions: Regions already found in text, to avoid scanning it again

    Returns:
        True if an opening marker after the last complete region is unmatched
    """
    if regions is None:
        regions = find_marked_regions(text, start_marker, end_marker)
    cursor = regions[-1].stop if regions else 0
    return text.find(start_marker, cursor) != NOT_FOUND
