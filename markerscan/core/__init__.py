"""Core domain logic for MarkerScan."""

from .config import Config, load_config
from .markers import classify_marker, define_short_symbol, scan_char
from .matching_end import find_matching_end
from .occurrences import count_occurrences
from .types import NOT_FOUND, MarkedRegion, MarkerKind

__all__ = [
    "NOT_FOUND",
    "Config",
    "MarkedRegion",
    "MarkerKind",
    "classify_marker",
    "count_occurrences",
    "define_short_symbol",
    "find_matching_end",
    "load_config",
    "scan_char",
]
