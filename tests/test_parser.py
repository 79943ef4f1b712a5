"""
Tests for parsing values into frame counts.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from smptecode import (
    InvalidTimecodeError,
    ParseError,
    PremiereTicks,
    Framerate,
    Ntsc,
    parse,
    parser,
    rates,
)


class TestParseTimecode:
    """Test parsing SMPTE timecode strings."""

    @pytest.mark.parametrize(
        "value, rate, expected",
        [
            ("17:23:13:02", rates.F23_98, 1502234),
            ("01:00:00:00", rates.F24, 86400),
            ("00:00:00:00", rates.F24, 0),
            ("-17:23:13:02", rates.F23_98, -1502234),
            ("01:00:00:00", rates.F25, 90000),
            (
                "01:00:00:00",
                Framerate.with_timebase(120, Ntsc.NON_DROP_FRAME),
                432000,
            ),
        ],
    )
    def test_full(self, value, rate, expected):
        """Test full timecode strings."""
        assert parse(value, rate) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("3:12", 84),
            ("12", 12),
            ("1:13:4", 1756),
            ("-1:13:4", -1756),
            ("1:00:00:0", 86400),
        ],
    )
    def test_partial(self, value, expected):
        """Test that partial timecodes fill the right-most fields first."""
        assert parser.parse_timecode(value, rates.F23_98) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00:62:04", "00:01:02:04"),
            ("00:61:00:00", "01:01:00:00"),
            ("01:120:00:00", "03:00:00:00"),
        ],
    )
    def test_overflowing_fields_carry(self, value, expected):
        """Test that hours, minutes and seconds are allowed to overflow."""
        assert parse(value, rates.F24) == parse(expected, rates.F24)

    def test_frames_at_timebase_is_rejected(self):
        """Test that the frames field must be lower than the timebase."""
        with pytest.raises(ParseError, match="lower than the timebase"):
            parse("00:00:00:24", rates.F24)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:00:59;29", 1799),
            ("00:01:00;02", 1800),
            ("00:01:01;00", 1828),
            ("00:09:00;02", 16184),
            ("00:10:00;00", 17982),
            ("00:10:00;01", 17983),
            ("01:00:00;00", 107892),
            ("-00:00:02;02", -62),
            # delimiter is not checked against the rate
            ("00:01:00:02", 1800),
        ],
    )
    def test_drop_frame_29_97(self, value, expected):
        """Test 29.97 drop-frame timecodes."""
        assert parse(value, rates.F29_97_DF) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("00:01:00;04", 3600),
            ("00:01:01;03", 3659),
            ("00:10:00;00", 35964),
        ],
    )
    def test_drop_frame_59_94(self, value, expected):
        """Test 59.94 drop-frame timecodes."""
        assert parse(value, rates.F59_94_DF) == expected

    @pytest.mark.parametrize(
        "value, rate",
        [
            ("00:01:00;00", rates.F29_97_DF),
            ("00:01:00;01", rates.F29_97_DF),
            ("00:09:00;01", rates.F29_97_DF),
            ("00:08:00:01", rates.F59_94_DF),
            ("00:08:00:02", rates.F59_94_DF),
            ("00:08:00:03", rates.F59_94_DF),
        ],
    )
    def test_skipped_drop_frame_numbers(self, value, rate):
        """Test that frame numbers skipped by drop-frame are rejected."""
        with pytest.raises(InvalidTimecodeError):
            parse(value, rate)

    def test_skipped_numbers_are_parse_errors(self):
        """Test that the drop-frame error is a ParseError."""
        with pytest.raises(ParseError):
            parse("00:01:00;00", rates.F29_97_DF)


class TestParseRuntime:
    """Test parsing runtime strings."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("01:00:03.6", Fraction(18018, 5)),
            ("3603.6", Fraction(18018, 5)),
            ("1:00:03.6", Fraction(18018, 5)),
            ("2:03.5", Fraction(247, 2)),
            ("-1.5", Fraction(-3, 2)),
            ("00:00:00", Fraction(0)),
        ],
    )
    def test_seconds(self, value, expected):
        """Test the exact seconds of a runtime."""
        assert parser.parse_runtime(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("01:00:03.6", 86400),
            ("3603.6", 86400),
            ("1.5", 36),
            ("-1.5", -36),
            ("0.0", 0),
        ],
    )
    def test_parse(self, value, expected):
        """Test that runtimes round to the nearest frame."""
        assert parse(value, rates.F23_98) == expected


class TestParseFeetAndFrames:
    """Test parsing 35mm feet+frames strings."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("5400+00", 86400),
            ("5400+13", 86413),
            ("0+00", 0),
            ("-3+14", -62),
            ("1+8", 24),
        ],
    )
    def test_valid(self, value, expected):
        """Test that feet+frames ignore the framerate."""
        assert parse(value, rates.F23_98) == expected
        assert parse(value, rates.F29_97_DF) == expected

    @pytest.mark.parametrize("value", ["1+1.5", "+10", "10+", "1+-2"])
    def test_invalid(self, value):
        """Test malformed feet+frames strings."""
        with pytest.raises(ParseError, match="feet\\+frames"):
            parse(value, rates.F24)


class TestParseNumbers:
    """Test parsing non-string values."""

    def test_int_is_frames(self):
        """Test that ints are frame counts."""
        assert parse(15000, rates.F29_97_DF) == 15000
        assert parse(-24, rates.F24) == -24
        assert parse("86400", rates.F24) == 86400

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Fraction(18018, 5), 86400),
            (Decimal("3603.6"), 86400),
            (3603.6, 86400),
            (1.5, 36),
            (Fraction(1, 1000), 0),
        ],
    )
    def test_numbers_are_seconds(self, value, expected):
        """Test that Fractions, Decimals and floats are seconds."""
        assert parse(value, rates.F23_98) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (PremiereTicks(254016000000), 24),
            (PremiereTicks(915372057600000), 86400),
            (PremiereTicks(0), 0),
        ],
    )
    def test_premiere_ticks(self, value, expected):
        """Test that tagged tick counts are converted from ticks."""
        assert parse(value, rates.F23_98) == expected

    def test_premiere_ticks_repr(self):
        """Test the PremiereTicks repr."""
        assert repr(PremiereTicks(10)) == "PremiereTicks(10)"


class TestParseErrors:
    """Test values that can not be parsed."""

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "   ",
            "abc",
            "1.2.3",
            "00:00:00:00:00",
            "1:-2",
            True,
            None,
            float("nan"),
            float("inf"),
            Decimal("NaN"),
            [1, 2],
        ],
    )
    def test_invalid(self, value):
        """Test that unrecognised values raise ParseError."""
        with pytest.raises(ParseError):
            parse(value, rates.F24)


class TestDedicatedParsers:
    """Test the single-format entry points."""

    def test_parse_frames(self):
        """Test frame-count values."""
        assert parser.parse_frames(24, rates.F24) == 24
        assert parser.parse_frames("01:00:00:00", rates.F24) == 86400
        assert parser.parse_frames("5400+00", rates.F24) == 86400
        assert parser.parse_frames("-24", rates.F24) == -24

    @pytest.mark.parametrize("value", ["1.5", "01:00:03.6", 1.5, Fraction(1), True])
    def test_parse_frames_rejects_seconds(self, value):
        """Test that seconds values are not frame counts."""
        with pytest.raises(ParseError):
            parser.parse_frames(value, rates.F24)

    def test_parse_seconds(self):
        """Test seconds values."""
        assert parser.parse_seconds("01:00:03.6", rates.F23_98) == 86400
        assert parser.parse_seconds(1, rates.F24) == 24
        assert parser.parse_seconds(Decimal("0.5"), rates.F24) == 12

        with pytest.raises(ParseError):
            parser.parse_seconds(False, rates.F24)

    def test_parse_premiere_ticks(self):
        """Test tick values."""
        assert parser.parse_premiere_ticks("915372057600000", rates.F23_98) == 86400
        assert parser.parse_premiere_ticks(254016000000, rates.F24) == 24
        assert parser.parse_premiere_ticks(-254016000000, rates.F24) == -24

    @pytest.mark.parametrize("value", ["1.5", "abc", 1.5, True])
    def test_parse_premiere_ticks_invalid(self, value):
        """Test that ticks must be whole numbers."""
        with pytest.raises(ParseError, match="ticks"):
            parser.parse_premiere_ticks(value, rates.F24)

    def test_seconds_to_frames_rounds_half_away_from_zero(self):
        """Test rounding at the half frame."""
        rate = Framerate.with_playback(2)
        assert parser.seconds_to_frames(Fraction(3, 4), rate) == 2
        assert parser.seconds_to_frames(Fraction(-3, 4), rate) == -2
        assert parser.seconds_to_frames(Fraction(1, 4), rate) == 1
