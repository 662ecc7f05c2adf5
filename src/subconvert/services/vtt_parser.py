"""Line-oriented WebVTT scanner.

The scanner walks a list of lines with a single cursor and moves through three
states: HEADER, METADATA and BODY. Malformed blocks inside the body are skipped
and scanning resumes on the next line; only a missing header is an error.
"""

import logging
import re
from enum import Enum, auto

from subconvert.models.errors import InvalidHeader
from subconvert.models.schemas import Cue, Track
from subconvert.services.cue_settings import parse_cue_settings
from subconvert.services.timestamps import VTT_TIMESTAMP, parse_vtt_timestamp
from subconvert.services.utils import prepare_text

logger = logging.getLogger(__name__)

VTT_HEADER_PATTERN = re.compile(r"WEBVTT(?:[ \t].*)?")
VTT_TIMING_PATTERN = re.compile(
    rf"({VTT_TIMESTAMP})[ \t]+-->[ \t]+({VTT_TIMESTAMP})(?:[ \t]+(.*))?", re.ASCII
)
NOTE_PATTERN = re.compile(r"NOTE(?:\s|$)")
SKIPPED_BLOCK_HEADERS = ("STYLE", "REGION")


class ScanState(Enum):
    """States of the WebVTT block scanner."""

    HEADER = auto()
    METADATA = auto()
    BODY = auto()
    DONE = auto()


def match_vtt_timing_line(line: str) -> re.Match | None:
    """Match a WebVTT timing line, capturing start, end and the settings tail."""
    return VTT_TIMING_PATTERN.fullmatch(line.strip())


class VttBlockScanner:
    """Extract cues from WebVTT text. Each instance scans one document once."""

    def __init__(self, content: str):
        self.lines = prepare_text(content).split("\n")
        self.pos = 0
        self.cues: list[Cue] = []
        self.state = ScanState.HEADER

    def scan(self) -> list[Cue]:
        steps = {
            ScanState.HEADER: self._read_header,
            ScanState.METADATA: self._skip_metadata,
            ScanState.BODY: self._read_block,
        }
        while self.state is not ScanState.DONE:
            self.state = steps[self.state]()
        return self.cues

    def _at_end(self) -> bool:
        return self.pos >= len(self.lines)

    def _is_blank(self, pos: int) -> bool:
        return self.lines[pos].strip() == ""

    def _skip_to_blank(self) -> None:
        while not self._at_end() and not self._is_blank(self.pos):
            self.pos += 1

    def _read_header(self) -> ScanState:
        first = self.lines[0].strip()
        if not VTT_HEADER_PATTERN.fullmatch(first):
            raise InvalidHeader(first)
        self.pos = 1
        return ScanState.METADATA

    def _skip_metadata(self) -> ScanState:
        # Header metadata and comments run until the first blank line.
        self._skip_to_blank()
        if not self._at_end() and self.lines[self.pos] == "":
            self.pos += 1
        return ScanState.BODY

    def _match_timing(self, pos: int) -> re.Match | None:
        if pos >= len(self.lines):
            return None
        return match_vtt_timing_line(self.lines[pos])

    def _read_block(self) -> ScanState:
        while not self._at_end() and self._is_blank(self.pos):
            self.pos += 1
        if self._at_end():
            return ScanState.DONE

        line = self.lines[self.pos]
        if NOTE_PATTERN.match(line) or line in SKIPPED_BLOCK_HEADERS:
            self.pos += 1
            self._skip_to_blank()
            self.pos += 1
            return ScanState.BODY

        cue_id = None
        timing_pos = self.pos
        match = self._match_timing(timing_pos)
        if match is None:
            cue_id = line.strip()
            timing_pos += 1
            match = self._match_timing(timing_pos)

        if match is None:
            logger.debug(f"Skipping malformed cue block at line {self.pos + 1}: {line!r}")
            self.pos += 1
            return ScanState.BODY

        start_ts, end_ts, settings_text = match.groups()
        text_end = timing_pos + 1
        while text_end < len(self.lines) and not self._is_blank(text_end):
            text_end += 1

        self.cues.append(
            Cue(
                id=cue_id,
                start=parse_vtt_timestamp(start_ts),
                end=parse_vtt_timestamp(end_ts),
                text="\n".join(self.lines[timing_pos + 1:text_end]),
                settings=parse_cue_settings((settings_text or "").split()),
            )
        )
        self.pos = text_end + 1
        return ScanState.BODY


def parse_vtt(content: str) -> Track:
    """
    Parse WebVTT content into a Track.

    Args:
        content: WebVTT file content, optionally BOM-prefixed.

    Returns:
        Track with format "vtt" and cues in source order.

    Raises:
        InvalidHeader: If the first line is not a WEBVTT line.
    """
    cues = VttBlockScanner(content).scan()
    logger.debug(f"Parsed {len(cues)} cues from VTT")
    return Track(cues=cues, format="vtt")
