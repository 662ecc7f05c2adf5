"""Conversion handler for turning one subtitle file into another format."""

import logging
from pathlib import Path

from subconvert.models.errors import SubtitleError
from subconvert.models.formatter import Formatter
from subconvert.models.schemas import ConversionResult, Track
from subconvert.services.detect import detect_format
from subconvert.services.file_io import output_path_for, read_subtitle, save_subtitle

logger = logging.getLogger(__name__)


def parse_content(
    content: str, formatters: dict[str, Formatter], source_format: str | None = None
) -> Track:
    """
    Parse content with the named formatter, or auto-detect the format.

    Args:
        content: Subtitle text.
        formatters: Available formatters keyed by format tag.
        source_format: Format tag to force, or None to detect.

    Returns:
        Parsed track.
    """
    fmt = source_format or detect_format(content)
    return formatters[fmt].parse(content)


def convert_file(
    source_path: str | Path,
    formatter: Formatter,
    formatters: dict[str, Formatter],
    output_dir: str | Path | None = None,
    source_format: str | None = None,
) -> ConversionResult:
    """
    Convert a single subtitle file.

    Args:
        source_path: File to convert.
        formatter: Formatter for the target format.
        formatters: Formatters used for parsing, keyed by format tag.
        output_dir: Directory for the output file. Defaults to the source directory.
        source_format: Force the input format instead of detecting it.

    Returns:
        ConversionResult with output path, cue count and success status.
    """
    source_path = Path(source_path)
    logger.info(f"Converting: {source_path} -> {formatter.name}")

    output_path = output_path_for(source_path, output_dir, formatter.extension)
    if output_path.resolve() == source_path.resolve():
        logger.error(f"Refusing to overwrite source file: {source_path}")
        return ConversionResult(
            source_path=str(source_path), target_format=formatter.name, success=False
        )

    try:
        content = read_subtitle(source_path)
        track = parse_content(content, formatters, source_format)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read {source_path}: {e}")
        return ConversionResult(
            source_path=str(source_path), target_format=formatter.name, success=False
        )
    except SubtitleError as e:
        logger.error(f"Failed to parse {source_path}: {e}")
        return ConversionResult(
            source_path=str(source_path),
            source_format=source_format,
            target_format=formatter.name,
            success=False,
        )

    if not track.cues:
        # Empty and fully malformed input look the same here
        logger.warning(f"No cues found in {source_path}")

    try:
        saved_path = save_subtitle(
            formatter.format(track), source_path, output_dir, formatter.extension
        )
    except OSError as e:
        logger.error(f"Failed to write output for {source_path}: {e}")
        return ConversionResult(
            source_path=str(source_path),
            source_format=track.format,
            target_format=formatter.name,
            cue_count=len(track.cues),
            success=False,
        )

    logger.info(f"Converted {source_path} -> {saved_path} ({len(track.cues)} cues)")
    return ConversionResult(
        source_path=str(source_path),
        output_path=str(saved_path),
        source_format=track.format,
        target_format=formatter.name,
        cue_count=len(track.cues),
        success=True,
    )
