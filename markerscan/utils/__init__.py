"""Utility functions for MarkerScan."""

from markerscan.utils.constants import Constants
from markerscan.utils.helpers import (
    ensure_directory_exists,
    expand_file_path,
    read_text_file,
    write_file_safely,
)
from markerscan.utils.logging import add_log_file_handler, is_debug_enabled, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "ensure_directory_exists",
    "expand_file_path",
    "is_debug_enabled",
    "read_text_file",
    "setup_logger",
    "write_file_safely",
]
