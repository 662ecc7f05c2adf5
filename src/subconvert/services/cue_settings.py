"""WebVTT cue settings: parse `key:value` tokens and serialize them back.

Each recognized key is validated on its own. An invalid value drops that key
and nothing is raised. The keys do not behave alike:

* `line` falls back to a raw signed integer index, `position` does not.
* `line` and `position` clamp any percent into [0, 100], while `size` only
  accepts one to three digits followed by a literal `%`.
* an anchor after the comma is kept even when the raw value was rejected.
"""

import logging
import re
from typing import Any, Callable, Iterable

from subconvert.models.schemas import (
    CueSettings,
    LineAuto,
    LineIndex,
    LinePercent,
    PositionAuto,
    PositionPercent,
)
from subconvert.services.utils import clamp_0_to_100

logger = logging.getLogger(__name__)

CUE_ALIGN_VALUES = ("start", "center", "end", "left", "right")
LINE_ALIGN_VALUES = ("start", "center", "end")
POSITION_ALIGN_VALUES = ("auto", "center", "line-left", "line-right")
VERTICAL_VALUES = ("rl", "lr")

_SIZE_PATTERN = re.compile(r"(\d{1,3})%", re.ASCII)
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
_INTEGER_PREFIX_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

Builder = dict[str, Any]


def _parse_number(text: str) -> int | float | None:
    """Parse a decimal number, keeping integers as int. Returns None if invalid."""
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    number = float(text)
    return int(number) if number.is_integer() else number


def _parse_percent(raw: str) -> int | float | None:
    """Parse a `NN%` value and clamp it. Returns None if the prefix is not a number."""
    number = _parse_number(raw[:-1])
    if number is None:
        return None
    return clamp_0_to_100(number)


def _split_anchor(value: str) -> tuple[str, str | None]:
    parts = value.split(",")
    return parts[0], parts[1] if len(parts) > 1 else None


def _set_align(out: Builder, value: str) -> None:
    align = value.lower()
    if align in CUE_ALIGN_VALUES:
        out["align"] = align


def _set_vertical(out: Builder, value: str) -> None:
    if value in VERTICAL_VALUES:
        out["vertical"] = value


def _set_size(out: Builder, value: str) -> None:
    # A bare number is rejected outright, never clamped.
    match = _SIZE_PATTERN.fullmatch(value)
    if match:
        out["size"] = clamp_0_to_100(int(match.group(1)))


def _set_region(out: Builder, value: str) -> None:
    if value:
        out["region"] = value


def _set_line(out: Builder, value: str) -> None:
    # line:auto | line:40%[,center] | line:-1[,start]
    raw, anchor = _split_anchor(value)
    if raw == "auto":
        out["line"] = LineAuto()
    elif raw.endswith("%"):
        percent = _parse_percent(raw)
        if percent is not None:
            out["line"] = LinePercent(value=percent)
    else:
        match = _INTEGER_PREFIX_PATTERN.match(raw)
        if match:
            try:
                out["line"] = LineIndex(value=int(match.group()))
            except ValueError:
                logger.debug(f"Dropping oversized line index: {raw[:20]}...")

    if anchor is not None and anchor.lower() in LINE_ALIGN_VALUES:
        out["line_align"] = anchor.lower()


def _set_position(out: Builder, value: str) -> None:
    # position:auto | position:90%[,line-right]
    raw, anchor = _split_anchor(value)
    if raw == "auto":
        out["position"] = PositionAuto()
    elif raw.endswith("%"):
        percent = _parse_percent(raw)
        if percent is not None:
            out["position"] = PositionPercent(value=percent)

    if anchor is not None and anchor.lower() in POSITION_ALIGN_VALUES:
        out["position_align"] = anchor.lower()


_SETTERS: dict[str, Callable[[Builder, str], None]] = {
    "align": _set_align,
    "vertical": _set_vertical,
    "size": _set_size,
    "region": _set_region,
    "line": _set_line,
    "position": _set_position,
}


def parse_cue_settings(tokens: Iterable[str]) -> CueSettings | None:
    """
    Parse cue setting tokens from the tail of a WebVTT timing line.

    Args:
        tokens: Whitespace-separated tokens, e.g. ["align:center", "size:80%"].

    Returns:
        CueSettings with the recognized keys, or None if no key was recognized.
    """
    out: Builder = {}
    for token in tokens:
        if ":" not in token:
            continue
        key, _, rest = token.partition(":")
        value = rest.split(":", 1)[0].strip()
        setter = _SETTERS.get(key.strip())
        if setter is None:
            logger.debug(f"Ignoring unknown cue setting: {token}")
            continue
        setter(out, value)

    if not out:
        return None
    return CueSettings(**out)


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def serialize_cue_settings(settings: CueSettings | None) -> str:
    """
    Serialize cue settings to space-separated tokens in canonical order.

    Order is line, position, size, align, vertical, region regardless of the
    order the tokens were read in.

    Args:
        settings: Cue settings, or None.

    Returns:
        The settings suffix for a timing line, or "" when there is nothing to emit.
    """
    if settings is None or settings.is_empty():
        return ""

    tokens = []

    if settings.line is not None:
        if isinstance(settings.line, LineAuto):
            value = "auto"
        elif isinstance(settings.line, LinePercent):
            value = f"{_format_number(settings.line.value)}%"
        else:
            value = str(settings.line.value)
        if settings.line_align:
            value += f",{settings.line_align}"
        tokens.append(f"line:{value}")

    if settings.position is not None:
        if isinstance(settings.position, PositionAuto):
            value = "auto"
        else:
            value = f"{_format_number(settings.position.value)}%"
        # position_align is re-emitted even when it is "auto".
        if settings.position_align:
            value += f",{settings.position_align}"
        tokens.append(f"position:{value}")

    if settings.size is not None:
        tokens.append(f"size:{_format_number(settings.size)}%")
    if settings.align:
        tokens.append(f"align:{settings.align}")
    if settings.vertical:
        tokens.append(f"vertical:{settings.vertical}")
    if settings.region:
        tokens.append(f"region:{settings.region}")

    return " ".join(tokens)
