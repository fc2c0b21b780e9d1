"""Occurrence counting within a bounded range of text."""


def count_occurrences(text: str, start: int, to_excluding: int, needle: str) -> int:
    """Count non-overlapping occurrences of needle starting in [start, to_excluding).

    The upper bound is clamped to the text length. After each hit the search
    resumes past the whole needle, so "aa" occurs twice in "aaaa", not three
    times.

    Args:
        text: Text to search
        start: First index an occurrence may start at
        to_excluding: Occurrences must start before this index
        needle: Non-empty character or string to count

    Returns:
        Number of occurrences found
    """
    count = 0
    i = start
    limit = min(len(text), to_excluding)
    while i < limit:
        i = text.find(needle, i)
        if 0 <= i < limit:
            count += 1
            i += len(needle)
        else:
            break
    return count
