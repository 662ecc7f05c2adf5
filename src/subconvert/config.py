"""Configuration management for the subtitle converter."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)

SUPPORTED_FORMATS = ("srt", "vtt")


@dataclass
class Config:
    """Converter configuration loaded from environment variables."""

    # Default target format when --to is not given
    target_format: str = field(
        default_factory=lambda: os.getenv("SUBCONVERT_TARGET_FORMAT", "vtt").lower()
    )
    # Empty means "next to the source file"
    output_dir: str = field(default_factory=lambda: os.getenv("SUBCONVERT_OUTPUT_DIR", ""))
    log_level: str = field(
        default_factory=lambda: os.getenv("SUBCONVERT_LOG_LEVEL", "INFO").upper()
    )

    def validate(self) -> None:
        """Validate configuration values."""
        if self.target_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"SUBCONVERT_TARGET_FORMAT must be one of {SUPPORTED_FORMATS}, "
                f"got {self.target_format!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"SUBCONVERT_LOG_LEVEL is not a logging level: {self.log_level!r}")


config = Config()
