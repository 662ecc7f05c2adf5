"""SRT (SubRip) formatter implementation."""

from subconvert.models.formatter import Formatter
from subconvert.models.schemas import Track
from subconvert.services.srt_formatter import serialize_srt
from subconvert.services.srt_parser import parse_srt


class SrtFormatter(Formatter):
    """Reads and writes SubRip subtitles."""

    @property
    def name(self) -> str:
        return "srt"

    @property
    def extension(self) -> str:
        return ".srt"

    def parse(self, content: str) -> Track:
        return parse_srt(content)

    def format(self, track: Track) -> str:
        return serialize_srt(track)
