"""Main entry point for the subtitle converter CLI."""

import argparse
import logging
import sys

from subconvert.config import SUPPORTED_FORMATS, config
from subconvert.handlers.convert import convert_file
from subconvert.infrastructure.dependency_injection import DependenciesContainer

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging to stdout."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def run(
    files: list[str],
    target_format: str,
    source_format: str | None = None,
    output_dir: str | None = None,
) -> bool:
    """
    Convert subtitle files to the target format.

    Args:
        files: Paths of subtitle files to convert.
        target_format: Output format tag ('srt' or 'vtt').
        source_format: Force the input format instead of detecting it.
        output_dir: Directory for output files. Defaults to each source directory.

    Returns:
        True if every file was converted, False otherwise.
    """
    container = DependenciesContainer()
    formatters = container.formatters()
    formatter = formatters[target_format]

    success_count = 0
    fail_count = 0

    for i, path in enumerate(files, start=1):
        logger.info(f"[{i}/{len(files)}] Processing {path}")
        result = convert_file(
            path,
            formatter,
            formatters,
            output_dir=output_dir,
            source_format=source_format,
        )
        if result.success:
            success_count += 1
        else:
            fail_count += 1

    logger.info(f"Completed: {success_count} success, {fail_count} failed")
    return fail_count == 0


def main(argv: list[str] | None = None) -> None:
    """Entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Convert subtitle files between SRT and WebVTT"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Subtitle files to convert (e.g., episode1.srt episode2.vtt)",
    )
    parser.add_argument(
        "--to",
        dest="target_format",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Output format (default: SUBCONVERT_TARGET_FORMAT or vtt)",
    )
    parser.add_argument(
        "--from",
        dest="source_format",
        choices=SUPPORTED_FORMATS,
        default=None,
        help="Input format (default: auto-detect)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for converted files (default: next to each source)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: SUBCONVERT_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    try:
        config.validate()
        setup_logging((args.log_level or config.log_level).upper())

        ok = run(
            files=args.files,
            target_format=args.target_format or config.target_format,
            source_format=args.source_format,
            output_dir=args.output_dir or config.output_dir or None,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
