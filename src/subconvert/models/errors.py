"""Errors raised by the subtitle parsers and the timestamp codec."""


class SubtitleError(ValueError):
    """Base class for subtitle parsing errors."""


class InvalidHeader(SubtitleError):
    """Raised when a WebVTT document does not start with a WEBVTT line."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Invalid VTT: missing WEBVTT header (got {line!r})")


class InvalidTimestamp(SubtitleError):
    """Raised when a timestamp does not match its format's fixed pattern."""

    def __init__(self, value: str, fmt: str):
        self.value = value
        self.format = fmt
        super().__init__(f"Invalid {fmt.upper()} timestamp: {value!r}")
