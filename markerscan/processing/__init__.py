"""Scan processing for MarkerScan."""

from markerscan.processing.data_models import FileScanResult, RegionResult, ScanReport
from markerscan.processing.pipeline import run_pipeline, scan_text

__all__ = ["FileScanResult", "RegionResult", "ScanReport", "run_pipeline", "scan_text"]
