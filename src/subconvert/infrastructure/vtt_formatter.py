"""VTT (WebVTT) formatter implementation."""

from subconvert.models.formatter import Formatter
from subconvert.models.schemas import Track
from subconvert.services.vtt_formatter import serialize_vtt
from subconvert.services.vtt_parser import parse_vtt


class VttFormatter(Formatter):
    """Reads and writes WebVTT subtitles."""

    @property
    def name(self) -> str:
        return "vtt"

    @property
    def extension(self) -> str:
        return ".vtt"

    def parse(self, content: str) -> Track:
        return parse_vtt(content)

    def format(self, track: Track) -> str:
        return serialize_vtt(track)
