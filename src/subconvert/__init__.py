"""Convert subtitle tracks between SubRip (SRT) and WebVTT."""

from subconvert.models.errors import InvalidHeader, InvalidTimestamp, SubtitleError
from subconvert.models.schemas import (
    Cue,
    CueSettings,
    LineAuto,
    LineIndex,
    LinePercent,
    PositionAuto,
    PositionPercent,
    Track,
)
from subconvert.services.cue_settings import parse_cue_settings, serialize_cue_settings
from subconvert.services.detect import detect_format
from subconvert.services.srt_formatter import serialize_srt
from subconvert.services.srt_parser import parse_srt
from subconvert.services.timestamps import (
    format_srt_time,
    format_vtt_time,
    parse_srt_timestamp,
    parse_vtt_timestamp,
)
from subconvert.services.utils import clamp_0_to_100, strip_bom
from subconvert.services.vtt_formatter import serialize_vtt
from subconvert.services.vtt_parser import parse_vtt


def parse(content: str) -> Track:
    """
    Parse SRT or WebVTT content, detecting the format first.

    Args:
        content: Subtitle file content.

    Returns:
        Parsed track.

    Raises:
        InvalidHeader: If the content is detected as WebVTT but has no valid header.
    """
    if detect_format(content) == "vtt":
        return parse_vtt(content)
    return parse_srt(content)


__all__ = [
    "parse",
    "parse_srt",
    "parse_vtt",
    "serialize_srt",
    "serialize_vtt",
    "parse_cue_settings",
    "serialize_cue_settings",
    "detect_format",
    "format_srt_time",
    "format_vtt_time",
    "parse_srt_timestamp",
    "parse_vtt_timestamp",
    "clamp_0_to_100",
    "strip_bom",
    "Cue",
    "CueSettings",
    "LineAuto",
    "LineIndex",
    "LinePercent",
    "PositionAuto",
    "PositionPercent",
    "Track",
    "SubtitleError",
    "InvalidHeader",
    "InvalidTimestamp",
]
