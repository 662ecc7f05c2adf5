"""Models package."""

from subconvert.models.errors import InvalidHeader, InvalidTimestamp, SubtitleError
from subconvert.models.formatter import Formatter
from subconvert.models.schemas import (
    ConversionResult,
    Cue,
    CueSettings,
    LineAuto,
    LineIndex,
    LinePercent,
    PositionAuto,
    PositionPercent,
    Track,
)

__all__ = [
    "SubtitleError",
    "InvalidHeader",
    "InvalidTimestamp",
    "Formatter",
    "ConversionResult",
    "Cue",
    "CueSettings",
    "LineAuto",
    "LineIndex",
    "LinePercent",
    "PositionAuto",
    "PositionPercent",
    "Track",
]
