"""Scan pipeline: read inputs, find regions, write the report."""

import time

from loguru import logger
from tqdm import tqdm

from markerscan.core import Config
from markerscan.markup import escape_string
from markerscan.processing.data_models import FileScanResult, RegionResult, ScanReport
from markerscan.reports import write_report
from markerscan.scanning import find_marked_regions, has_unterminated_region
from markerscan.utils import is_debug_enabled, read_text_file


def scan_text(
    path: str,
    text: str,
    start_marker: str,
    end_marker: str,
    escape: bool = False,
    include_content: bool = True,
) -> FileScanResult:
    """Scan one text and collect its top-level regions.

    Args:
        path: Name reported for the text
        text: Text to scan
        start_marker: Opening marker
        end_marker: End marker
        escape: Escape region contents as markup entities
        include_content: Include region contents in the result

    Returns:
        FileScanResult for the text
    """
    marked = find_marked_regions(text, start_marker, end_marker)
    regions = []
    for region in marked:
        content = None
        if include_content:
            content = region.content(text)
            if escape:
                content = escape_string(content)
        regions.append(RegionResult(start=region.start, end=region.end, content=content))

    unterminated = has_unterminated_region(text, start_marker, end_marker, marked)
    if unterminated:
        logger.warning(f"⚠️  {path}: unterminated {start_marker!r} after last region")

    return FileScanResult(path=path, regions=regions, unterminated=unterminated)


def run_pipeline(config: Config) -> ScanReport:
    """Scan every configured input and write the report.

    Args:
        config: Configuration object

    Returns:
        The ScanReport that was written
    """
    start_time = time.time()
    verbose = config.verbose

    if verbose:
        logger.info(
            f"Scanning {len(config.inputs)} file(s) for "
            f"{config.start_marker!r} ... {config.end_marker!r}"
        )

    inputs = config.inputs
    if verbose:
        inputs = tqdm(config.inputs, desc="Scanning files", unit="file")

    files = []
    for path in inputs:
        text = read_text_file(path)
        result = scan_text(
            path,
            text,
            config.start_marker,
            config.end_marker,
            escape=config.escape,
            include_content=config.include_content,
        )
        if is_debug_enabled():
            for region in result.regions:
                logger.debug(f"  {path}: region {region.start}-{region.end}")
        files.append(result)

    report = ScanReport(
        start_marker=config.start_marker,
        end_marker=config.end_marker,
        files=files,
        elapsed_time=time.time() - start_time,
    )

    write_report(report, config.output, config.output_format)

    if verbose:
        logger.info(f"  Found {report.total_regions} region(s) in {report.elapsed_time:.2f}s")

    return report
