"""Infrastructure package."""

from subconvert.infrastructure.dependency_injection import DependenciesContainer
from subconvert.infrastructure.srt_formatter import SrtFormatter
from subconvert.infrastructure.vtt_formatter import VttFormatter

__all__ = [
    "DependenciesContainer",
    "SrtFormatter",
    "VttFormatter",
]
