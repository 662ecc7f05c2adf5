"""Tests for the WebVTT cue settings grammar."""

import pytest

from subconvert.models.schemas import (
    CueSettings,
    LineAuto,
    LineIndex,
    LinePercent,
    PositionAuto,
    PositionPercent,
)
from subconvert.services.cue_settings import parse_cue_settings, serialize_cue_settings


def parse(text: str) -> CueSettings | None:
    return parse_cue_settings(text.split())


class TestParseCueSettings:
    """Tests for parse_cue_settings."""

    def test_no_tokens_returns_none(self):
        """Test an empty token list gives no settings."""
        assert parse_cue_settings([]) is None

    def test_all_settings(self):
        """Test every supported key is recognized."""
        settings = parse(
            "align:end vertical:rl size:75% region:foo line:40%,center position:90%,line-right"
        )

        assert settings.align == "end"
        assert settings.vertical == "rl"
        assert settings.size == 75
        assert settings.region == "foo"
        assert settings.line == LinePercent(value=40)
        assert settings.line_align == "center"
        assert settings.snap_to_lines is False
        assert settings.position == PositionPercent(value=90)
        assert settings.position_align == "line-right"

    def test_line_negative_index(self):
        """Test a bare negative integer is a snap-to-lines index."""
        settings = parse("line:-1")

        assert settings.line == LineIndex(value=-1)
        assert settings.snap_to_lines is True

    def test_line_index_is_unranged(self):
        """Test line indexes are not clamped."""
        assert parse("line:250").line == LineIndex(value=250)

    def test_line_and_position_auto(self):
        """Test the auto keyword for line and position."""
        settings = parse("line:auto position:auto")

        assert settings.line == LineAuto()
        assert settings.position == PositionAuto()
        assert settings.snap_to_lines is None

    def test_percent_values_are_clamped(self):
        """Test line and position percents are clamped into [0, 100]."""
        settings = parse("line:200% position:101%")

        assert settings.line == LinePercent(value=100)
        assert settings.snap_to_lines is False
        assert settings.position == PositionPercent(value=100)

    def test_negative_percent_clamps_to_zero(self):
        """Test a negative line percent is clamped to zero."""
        assert parse("line:-20%").line == LinePercent(value=0)

    def test_fractional_percent_is_kept(self):
        """Test fractional percents are stored as floats."""
        assert parse("position:33.5%").position == PositionPercent(value=33.5)

    def test_size_without_percent_is_dropped(self):
        """Test size needs a literal percent sign and is never clamped without it."""
        assert parse("size:150") is None
        assert parse("size:50") is None

    def test_size_with_percent_is_clamped(self):
        """Test size up to three digits with a percent sign is clamped."""
        assert parse("size:150%").size == 100
        assert parse("size:0%").size == 0

    def test_size_with_too_many_digits_is_dropped(self):
        """Test size accepts at most three digits."""
        assert parse("size:1000%") is None

    def test_position_has_no_index_fallback(self):
        """Test a bare integer position is ignored."""
        assert parse("position:50") is None

    def test_invalid_values_are_dropped(self):
        """Test invalid values drop their key without raising."""
        settings = parse(
            "align align:bogus vertical:xx size:999 region: line:abc,foo position:abc,foo"
        )
        assert settings is None

    def test_invalid_line_keeps_other_keys(self):
        """Test an invalid line value does not affect other settings."""
        settings = parse("line:a position:50%")

        assert settings.line is None
        assert settings.position == PositionPercent(value=50)

    def test_line_anchor_kept_when_value_invalid(self):
        """Test the line anchor is evaluated independently of the raw value."""
        settings = parse("line:abc,start")

        assert settings.line is None
        assert settings.line_align == "start"

    def test_position_anchor_kept_when_value_invalid(self):
        """Test a valid position anchor, including auto, is stored on its own."""
        settings = parse("position:50,auto")

        assert settings.position is None
        assert settings.position_align == "auto"

    def test_line_index_uses_leading_integer(self):
        """Test the index branch reads a leading integer like parseInt."""
        assert parse("line:3abc").line == LineIndex(value=3)

    def test_oversized_line_index_is_dropped(self):
        """Test a line index too long to convert is dropped without raising."""
        settings = parse("line:" + "9" * 5000 + ",start align:end")

        assert settings.line is None
        assert settings.line_align == "start"
        assert settings.align == "end"

    def test_percent_with_non_numeric_prefix_is_dropped(self):
        """Test a percent value that is not a number sets nothing."""
        assert parse("line:abc%") is None
        assert parse("position:%") is None

    def test_align_is_case_insensitive(self):
        """Test align values and anchors are lower-cased."""
        settings = parse("align:CENTER line:10%,END")

        assert settings.align == "center"
        assert settings.line_align == "end"

    def test_vertical_is_case_sensitive(self):
        """Test vertical only accepts exact lowercase values."""
        assert parse("vertical:RL") is None

    def test_unknown_keys_ignored(self):
        """Test unknown keys are dropped."""
        assert parse("foo:bar Align:center") is None

    def test_later_token_wins(self):
        """Test repeated keys overwrite earlier values."""
        assert parse("align:start align:end").align == "end"

    def test_value_stops_at_second_colon(self):
        """Test only the text between the first and second colon is the value."""
        assert parse("region:a:b").region == "a"


class TestSerializeCueSettings:
    """Tests for serialize_cue_settings."""

    def test_none_and_empty(self):
        """Test absent or empty settings serialize to an empty string."""
        assert serialize_cue_settings(None) == ""
        assert serialize_cue_settings(CueSettings()) == ""
        assert CueSettings().is_empty() is True

    def test_line_auto(self):
        """Test line auto."""
        assert serialize_cue_settings(CueSettings(line=LineAuto())) == "line:auto"

    def test_line_percent_with_align(self):
        """Test a percent line with an anchor."""
        settings = CueSettings(line=LinePercent(value=40), line_align="center")
        assert serialize_cue_settings(settings) == "line:40%,center"

    def test_line_index_with_align(self):
        """Test an index line with an anchor."""
        settings = CueSettings(line=LineIndex(value=2), line_align="end")
        assert serialize_cue_settings(settings) == "line:2,end"

    def test_position_auto(self):
        """Test position auto."""
        assert serialize_cue_settings(CueSettings(position=PositionAuto())) == "position:auto"

    def test_position_with_align(self):
        """Test position with an anchor."""
        settings = CueSettings(position=PositionPercent(value=90), position_align="line-right")
        assert serialize_cue_settings(settings) == "position:90%,line-right"

    def test_position_auto_align_is_emitted(self):
        """Test an auto position anchor is written out."""
        settings = CueSettings(position=PositionPercent(value=90), position_align="auto")
        assert serialize_cue_settings(settings) == "position:90%,auto"

    def test_size_zero_is_emitted(self):
        """Test a zero size is still written."""
        assert serialize_cue_settings(CueSettings(size=0)) == "size:0%"

    def test_align_vertical_region(self):
        """Test plain string settings."""
        settings = CueSettings(align="center", region="foo", vertical="rl")
        assert serialize_cue_settings(settings) == "align:center vertical:rl region:foo"

    def test_canonical_order(self):
        """Test all settings are written in canonical order."""
        settings = CueSettings(
            align="end",
            line=LinePercent(value=40),
            line_align="center",
            position=PositionPercent(value=90),
            position_align="line-right",
            region="foo",
            size=80,
            vertical="rl",
        )
        assert serialize_cue_settings(settings) == (
            "line:40%,center position:90%,line-right size:80% align:end vertical:rl region:foo"
        )

    def test_reorders_parsed_tokens(self):
        """Test serialization order does not follow the source token order."""
        settings = parse("region:r align:left size:10% line:0")
        assert serialize_cue_settings(settings) == "line:0 size:10% align:left region:r"

    @pytest.mark.parametrize(
        "text",
        [
            "line:-3,start position:25%,center size:60% align:left vertical:lr region:top",
            "line:auto position:auto",
            "line:12.5% position:0%,auto",
        ],
    )
    def test_canonical_text_round_trip(self, text):
        """Test canonical settings text survives parse and serialize."""
        assert serialize_cue_settings(parse(text)) == text
