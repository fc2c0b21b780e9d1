"""Find the end marker that closes an already consumed opening marker.

Nesting is tracked with a counter that starts at 1 for the opening marker.
Each step jumps to the next end marker, charges it against the counter and
credits every opening seen in the gap before it. Two counting strategies
exist:

- Short markers (two identical characters such as ``{{``) count individual
  characters in the gap. Every bare occurrence of the character is treated
  as a nesting signal, including stray single characters.
- Long markers (anything else) count whole start-marker strings.

Both strategies return the same result on balanced input; the short one
avoids substring searches for the common doubled-character case.
"""

from markerscan.core.markers import define_short_symbol, scan_char
from markerscan.core.occurrences import count_occurrences
from markerscan.core.types import NOT_FOUND


def find_matching_end(
    start_symbol: str, end_symbol: str, text: str, after_start_idx: int
) -> int:
    """Find the index of the end marker closing the opening marker before after_start_idx.

    Args:
        start_symbol: Opening marker, e.g. ``{{``
        end_symbol: End marker, e.g. ``}}``
        text: Full text to scan
        after_start_idx: Index just after the consumed opening marker

    Returns:
        Index of the first character of the matching end marker, or -1 when
        after_start_idx is negative or no balanced end marker exists

    Raises:
        ValueError: If either marker is empty
    """
    if not start_symbol or not end_symbol:
        raise ValueError("start and end markers must be non-empty")
    if after_start_idx < 0:
        return NOT_FOUND

    if define_short_symbol(start_symbol) is not None or define_short_symbol(end_symbol) is not None:
        return _find_for_short_symbols(
            scan_char(start_symbol), scan_char(end_symbol), text, after_start_idx, end_symbol
        )
    return _find_for_long_symbols(text, after_start_idx, start_symbol, end_symbol)


def _find_for_short_symbols(
    short_start: str, short_end: str, text: str, after_start_idx: int, end_symbol: str
) -> int:
    """Scan counting single start/end characters between end marker hits."""
    total_starts = 1
    look_from = after_start_idx
    while total_starts > 0:
        total_starts -= 1
        next_end_idx = text.find(end_symbol, look_from)
        if next_end_idx == NOT_FOUND:
            return NOT_FOUND
        num_starts = count_occurrences(text, look_from, next_end_idx, short_start)
        num_ends = count_occurrences(text, look_from, next_end_idx, short_end)
        total_starts += num_starts - num_ends
        look_from = next_end_idx + 1
        if total_starts <= 0:
            return next_end_idx
    return NOT_FOUND


def _find_for_long_symbols(text: str, after_start_idx: int, start_symbol: str, end_symbol: str) -> int:
    """Scan counting whole start-marker strings between end marker hits."""
    total_starts = 1
    look_from = after_start_idx
    while total_starts > 0:
        total_starts -= 1
        next_end_idx = text.find(end_symbol, look_from)
        if next_end_idx == NOT_FOUND:
            return NOT_FOUND
        num_starts = count_occurrences(text, look_from, next_end_idx, start_symbol)
        if num_starts > 0:
            total_starts += num_starts
        look_from = next_end_idx + len(end_symbol)
        # Only non-negative credits follow the decrement, so == 0 and <= 0 agree.
        # python -O strips this assert; TestLongStrategyCounter guards the invariant.
        assert total_starts >= 0, "nesting counter went negative"
        if total_starts == 0:
            return next_end_idx
    return NOT_FOUND
