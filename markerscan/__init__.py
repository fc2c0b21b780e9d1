"""MarkerScan - nested start/end marker matching.

Find the end marker that closes an opening marker, honoring nesting, and
report every top-level marked region of a text.
"""

from markerscan.core import (
    NOT_FOUND,
    Config,
    MarkedRegion,
    MarkerKind,
    find_matching_end,
    load_config,
)
from markerscan.processing import run_pipeline
from markerscan.scanning import find_marked_regions, iter_marked_regions
from markerscan.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "NOT_FOUND",
    "Config",
    "MarkedRegion",
    "MarkerKind",
    "find_marked_regions",
    "find_matching_end",
    "iter_marked_regions",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
