"""Millisecond timestamp codec for SRT and WebVTT."""

import re

from subconvert.models.errors import InvalidTimestamp

SRT_TIMESTAMP = r"\d{2}:\d{2}:\d{2},\d{3}"
VTT_TIMESTAMP = r"(?:\d{2}:)?\d{2}:\d{2}\.\d{3}"

_SRT_PATTERN = re.compile(r"(\d{2}):(\d{2}):(\d{2}),(\d{3})", re.ASCII)
_VTT_PATTERN = re.compile(r"(?:(\d{2}):)?(\d{2}):(\d{2})\.(\d{3})", re.ASCII)

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000
_MS_PER_SECOND = 1000


def _to_milliseconds(hours: int, minutes: int, seconds: int, millis: int) -> int:
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + millis


def _split(ms_total: int) -> tuple[int, int, int, int]:
    ms_total = max(0, int(ms_total))
    hours = ms_total // _MS_PER_HOUR
    minutes = (ms_total % _MS_PER_HOUR) // _MS_PER_MINUTE
    seconds = (ms_total % _MS_PER_MINUTE) // _MS_PER_SECOND
    millis = ms_total % _MS_PER_SECOND
    return hours, minutes, seconds, millis


def parse_srt_timestamp(value: str) -> int:
    """
    Parse an SRT timestamp (HH:MM:SS,mmm) to milliseconds.

    Minutes and seconds are taken as literal two-digit numbers; no range check
    is applied, so "00:99:00,000" is accepted.

    Args:
        value: Timestamp string.

    Returns:
        Time in milliseconds.

    Raises:
        InvalidTimestamp: If the value is not exactly HH:MM:SS,mmm.
    """
    match = _SRT_PATTERN.fullmatch(value)
    if not match:
        raise InvalidTimestamp(value, "srt")
    hours, minutes, seconds, millis = (int(group) for group in match.groups())
    return _to_milliseconds(hours, minutes, seconds, millis)


def parse_vtt_timestamp(value: str) -> int:
    """
    Parse a WebVTT timestamp ([HH:]MM:SS.mmm) to milliseconds.

    Args:
        value: Timestamp string. The hour field is optional.

    Returns:
        Time in milliseconds.

    Raises:
        InvalidTimestamp: If the value does not match [HH:]MM:SS.mmm.
    """
    match = _VTT_PATTERN.fullmatch(value)
    if not match:
        raise InvalidTimestamp(value, "vtt")
    hours, minutes, seconds, millis = match.groups()
    return _to_milliseconds(int(hours or 0), int(minutes), int(seconds), int(millis))


def format_srt_time(ms_total: int) -> str:
    """
    Convert milliseconds to SRT timestamp format (HH:MM:SS,mmm).

    Negative input is clamped to zero. Hours are never wrapped.
    """
    hours, minutes, seconds, millis = _split(ms_total)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def format_vtt_time(ms_total: int) -> str:
    """
    Convert milliseconds to WebVTT timestamp format (HH:MM:SS.mmm).

    Negative input is clamped to zero. Hours are always emitted.
    """
    hours, minutes, seconds, millis = _split(ms_total)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
