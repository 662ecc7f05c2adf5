"""Pydantic models for subtitle tracks, cues and WebVTT cue settings."""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, field_validator

from subconvert.services.utils import clamp_0_to_100

TrackFormat = Literal["srt", "vtt"]
CueAlign = Literal["start", "center", "end", "left", "right"]
LineAlign = Literal["start", "center", "end"]
PositionAlign = Literal["auto", "center", "line-left", "line-right"]
Vertical = Literal["lr", "rl"]


class FrozenModel(BaseModel):
    """Immutable value record."""

    model_config = ConfigDict(frozen=True)


class LineAuto(FrozenModel):
    """`line:auto`."""

    kind: Literal["auto"] = "auto"


class LineIndex(FrozenModel):
    """Line number placement (snap-to-lines). Negative values count from the bottom."""

    kind: Literal["index"] = "index"
    value: int


class LinePercent(FrozenModel):
    """Percentage placement of the cue box along the block axis."""

    kind: Literal["percent"] = "percent"
    value: int | float

    @field_validator("value")
    @classmethod
    def _clamp(cls, value: int | float) -> int | float:
        return clamp_0_to_100(value)


class PositionAuto(FrozenModel):
    """`position:auto`."""

    kind: Literal["auto"] = "auto"


class PositionPercent(FrozenModel):
    """Percentage indent of the cue box along the inline axis."""

    kind: Literal["percent"] = "percent"
    value: int | float

    @field_validator("value")
    @classmethod
    def _clamp(cls, value: int | float) -> int | float:
        return clamp_0_to_100(value)


LineSetting = Union[LineAuto, LineIndex, LinePercent]
PositionSetting = Union[PositionAuto, PositionPercent]


class CueSettings(FrozenModel):
    """WebVTT cue settings parsed from the tail of a timing line."""

    align: CueAlign | None = None
    line: LineSetting | None = None
    line_align: LineAlign | None = None
    position: PositionSetting | None = None
    position_align: PositionAlign | None = None
    size: int | float | None = None
    region: str | None = None
    vertical: Vertical | None = None

    @field_validator("size")
    @classmethod
    def _clamp_size(cls, value: int | float | None) -> int | float | None:
        if value is None:
            return None
        return clamp_0_to_100(value)

    @property
    def snap_to_lines(self) -> bool | None:
        """True for index placement, False for percent placement, None otherwise."""
        if isinstance(self.line, LineIndex):
            return True
        if isinstance(self.line, LinePercent):
            return False
        return None

    def is_empty(self) -> bool:
        """True when no setting is present."""
        return all(getattr(self, name) is None for name in type(self).model_fields)


class Cue(FrozenModel):
    """A single timed subtitle unit. Times are in milliseconds."""

    start: int
    end: int
    text: str = ""
    id: str | None = None
    settings: CueSettings | None = None


class Track(FrozenModel):
    """Ordered cues of one subtitle document."""

    cues: tuple[Cue, ...] = ()
    format: TrackFormat | None = None


class ConversionResult(BaseModel):
    """Result of converting one subtitle file."""

    source_path: str
    output_path: str | None = None
    source_format: TrackFormat | None = None
    target_format: TrackFormat
    cue_count: int = 0
    success: bool
