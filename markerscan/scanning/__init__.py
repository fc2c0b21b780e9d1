"""Whole-text scanning for marked regions."""

from markerscan.scanning.regions import (
    find_marked_regions,
    has_unterminated_region,
    iter_marked_regions,
)

__all__ = ["find_marked_regions", "has_unterminated_region", "iter_marked_regions"]
