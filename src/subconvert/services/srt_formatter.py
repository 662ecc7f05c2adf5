"""Serialize tracks to SubRip (SRT)."""

from subconvert.models.schemas import Cue, Track
from subconvert.services.timestamps import format_srt_time


def cue_to_srt_block(index: int, cue: Cue) -> str:
    """Format one cue as an SRT block (without the trailing blank line)."""
    return "\n".join([
        str(index),
        f"{format_srt_time(cue.start)} --> {format_srt_time(cue.end)}",
        cue.text or "",
    ])


def serialize_srt(track: Track) -> str:
    """
    Convert a track to SRT format.

    Cues are renumbered from 1; cue ids have no SRT representation and are dropped.

    Args:
        track: Track to serialize.

    Returns:
        Complete SRT file content as string.
    """
    return "\n".join(
        f"{cue_to_srt_block(index, cue)}\n"
        for index, cue in enumerate(track.cues, start=1)
    )
