"""Tests for format detection and the generic parse entry point."""

import pytest

from subconvert import parse
from subconvert.models.errors import InvalidHeader
from subconvert.services.detect import detect_format


class TestDetectFormat:
    """Tests for detect_format."""

    def test_webvtt_header(self):
        """Test WebVTT is detected by its header."""
        assert detect_format("WEBVTT\n00:00:01.000 --> 00:00:04.000") == "vtt"

    def test_srt_timing_line(self):
        """Test SRT is detected by a timing line."""
        assert detect_format("00:00:01,000 --> 00:00:04,000\nHello") == "srt"
        assert detect_format("\n00:00:01,000 --> 00:00:04,000") == "srt"
        assert detect_format("1\n00:00:01,000 --> 00:00:04,000\nHi") == "srt"

    def test_bom_and_leading_whitespace(self):
        """Test a BOM and leading whitespace before the header."""
        assert detect_format("\ufeffWEBVTT\n") == "vtt"
        assert detect_format("   WEBVTT\n") == "vtt"

    @pytest.mark.parametrize("content", ["", "Some random text", "00:00:01.000 --> 00:00:04.000"])
    def test_defaults_to_vtt(self, content):
        """Test inputs without an SRT timing line default to vtt."""
        assert detect_format(content) == "vtt"


class TestParse:
    """Tests for parse."""

    def test_parse_vtt(self):
        """Test VTT content is parsed as VTT."""
        track = parse("WEBVTT\n\n00:00:01.000 --> 00:00:04.000\nHello world!")

        assert track.format == "vtt"
        assert track.cues[0].text == "Hello world!"

    def test_parse_srt(self):
        """Test SRT content is parsed as SRT."""
        track = parse("1\n00:00:01,000 --> 00:00:04,000\nHello world!")

        assert track.format == "srt"
        assert track.cues[0].start == 1000
        assert track.cues[0].end == 4000

    def test_undetectable_input_fails_as_vtt(self):
        """Test content with neither signature falls through to the VTT parser."""
        with pytest.raises(InvalidHeader):
            parse("Some random text")
