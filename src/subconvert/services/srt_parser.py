"""SubRip (SRT) block scanner."""

import logging
import re

from subconvert.models.schemas import Cue, Track
from subconvert.services.timestamps import SRT_TIMESTAMP, parse_srt_timestamp
from subconvert.services.utils import prepare_text

logger = logging.getLogger(__name__)

SRT_BLOCK_SEPARATOR = re.compile(r"\n{2,}")
SRT_TIMING_PATTERN = re.compile(
    rf"({SRT_TIMESTAMP})\s+-->\s+({SRT_TIMESTAMP})", re.ASCII
)
SRT_INDEX_PATTERN = re.compile(r"\d+", re.ASCII)


def parse_srt_block(block: str) -> Cue | None:
    """
    Parse one blank-line-delimited SRT block.

    Args:
        block: Block text: an optional numeric index, a timing line and text lines.

    Returns:
        The cue, or None if the block is too short or its timing line is invalid.
    """
    lines = [line.strip() for line in block.split("\n")]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        return None

    # The index line carries no information and is not validated.
    timing_idx = 1 if SRT_INDEX_PATTERN.fullmatch(lines[0]) else 0

    match = SRT_TIMING_PATTERN.fullmatch(lines[timing_idx])
    if not match:
        return None

    return Cue(
        start=parse_srt_timestamp(match.group(1)),
        end=parse_srt_timestamp(match.group(2)),
        text="\n".join(lines[timing_idx + 1:]),
    )


def parse_srt(content: str) -> Track:
    """
    Parse SRT content into a Track.

    Blocks that cannot be parsed are skipped, so malformed input yields fewer
    cues (possibly none) rather than an error.

    Args:
        content: SRT file content, optionally BOM-prefixed.

    Returns:
        Track with format "srt" and cues in source order.
    """
    cues = []
    for block in SRT_BLOCK_SEPARATOR.split(prepare_text(content)):
        cue = parse_srt_block(block)
        if cue is None:
            if block.strip():
                logger.debug(f"Skipping malformed SRT block: {block[:80]!r}")
            continue
        cues.append(cue)

    logger.debug(f"Parsed {len(cues)} cues from SRT")
    return Track(cues=cues, format="srt")
