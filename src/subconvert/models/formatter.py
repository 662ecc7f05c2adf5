"""Abstract subtitle format base class."""

from abc import ABC, abstractmethod

from subconvert.models.schemas import Track, TrackFormat


class Formatter(ABC):
    """Abstract base class for subtitle formats."""

    @property
    @abstractmethod
    def name(self) -> TrackFormat:
        """Format tag (e.g., 'srt', 'vtt')."""
        pass

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension for this format (e.g., '.vtt', '.srt')."""
        pass

    @abstractmethod
    def parse(self, content: str) -> Track:
        """Parse file content into a track."""
        pass

    @abstractmethod
    def format(self, track: Track) -> str:
        """Convert a track to file content."""
        pass
