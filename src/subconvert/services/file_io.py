"""Read and write subtitle files."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_subtitle(path: str | Path) -> str:
    """
    Read a subtitle file as UTF-8 text.

    A leading byte-order mark is kept; the parsers strip it. Line endings are
    preserved as-is.

    Args:
        path: Path to the subtitle file.

    Returns:
        File content.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def output_path_for(
    source_path: str | Path, output_dir: str | Path | None, extension: str
) -> Path:
    """Derive the output file path: source stem + target suffix, in output_dir or next to the source."""
    source_path = Path(source_path)
    directory = Path(output_dir) if output_dir else source_path.parent
    return directory / source_path.with_suffix(extension).name


def save_subtitle(
    content: str, source_path: str | Path, output_dir: str | Path | None, extension: str
) -> Path:
    """
    Save converted subtitle content.

    Args:
        content: Serialized subtitle text.
        source_path: Path of the file that was converted (used to derive the name).
        output_dir: Directory to write to. Defaults to the source file's directory.
        extension: Suffix of the target format, e.g. ".vtt".

    Returns:
        Path to the saved file.
    """
    output_path = output_path_for(source_path, output_dir, extension)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8", newline="")

    logger.debug(f"Wrote {len(content)} characters to {output_path}")
    return output_path
