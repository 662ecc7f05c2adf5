"""Handlers package."""

from subconvert.handlers.convert import convert_file, parse_content

__all__ = ["convert_file", "parse_content"]
