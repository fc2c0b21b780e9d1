"""Command-line interface for MarkerScan."""

from markerscan.cli.parser import create_parser

__all__ = ["create_parser"]
