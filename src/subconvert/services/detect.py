"""Guess the subtitle format of a document."""

import re

from subconvert.models.schemas import TrackFormat
from subconvert.services.timestamps import SRT_TIMESTAMP
from subconvert.services.utils import strip_bom

_SRT_TIMING_LINE = re.compile(
    rf"(?:^|\n){SRT_TIMESTAMP}\s+-->\s+{SRT_TIMESTAMP}", re.ASCII
)


def detect_format(content: str) -> TrackFormat:
    """
    Detect whether content is WebVTT or SRT.

    Returns "vtt" when the text starts with WEBVTT, "srt" when any line starts
    with an SRT timing line, and "vtt" otherwise.
    """
    text = strip_bom(content).lstrip()
    if text.startswith("WEBVTT"):
        return "vtt"
    return "srt" if _SRT_TIMING_LINE.search(text) else "vtt"
