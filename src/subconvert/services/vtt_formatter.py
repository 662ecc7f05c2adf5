"""Serialize tracks to WebVTT."""

from subconvert.models.schemas import Cue, Track
from subconvert.services.cue_settings import serialize_cue_settings
from subconvert.services.timestamps import format_vtt_time

VTT_HEADER = "WEBVTT"


def cue_to_vtt_block(cue: Cue) -> str:
    """Format one cue as a WebVTT block (without the trailing blank line)."""
    lines = []
    if cue.id:
        lines.append(cue.id)

    timing = f"{format_vtt_time(cue.start)} --> {format_vtt_time(cue.end)}"
    settings = serialize_cue_settings(cue.settings)
    if settings:
        timing = f"{timing} {settings}"
    lines.append(timing)
    lines.append(cue.text or "")

    return "\n".join(lines)


def serialize_vtt(track: Track) -> str:
    """
    Convert a track to WebVTT format.

    Args:
        track: Track to serialize.

    Returns:
        Complete VTT file content as string. An empty track gives "WEBVTT\\n\\n".
    """
    body = "\n".join(f"{cue_to_vtt_block(cue)}\n" for cue in track.cues)
    return f"{VTT_HEADER}\n\n{body}"
