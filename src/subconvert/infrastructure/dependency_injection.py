"""Dependency injection container for the application."""

from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from subconvert.infrastructure.srt_formatter import SrtFormatter
from subconvert.infrastructure.vtt_formatter import VttFormatter


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    # Formatters keyed by format tag
    formatters = providers.Dict(
        srt=providers.Singleton(SrtFormatter),
        vtt=providers.Singleton(VttFormatter),
    )
