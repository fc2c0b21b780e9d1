"""Main entry point for markerscan package."""

from loguru import logger

from markerscan.cli import create_parser
from markerscan.core import load_config
from markerscan.processing import run_pipeline
from markerscan.utils.logging import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("MarkerScan - Nested Marker Region Finder")
        logger.info("=" * 60)
        logger.info("")
        logger.info("Configuration:")
        logger.info(f"  Markers: {config.start_marker!r} ... {config.end_marker!r}")
        logger.info(f"  Inputs: {len(config.inputs)} file(s)")
        logger.info(f"  Format: {config.output_format}")
        if config.output:
            logger.info(f"  Output: {config.output}")
        if config.escape:
            logger.info("  Escaping region contents")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Scan completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Scan interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Scan failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
