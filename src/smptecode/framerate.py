"""Framerate class describing the playback speed and timebase of a Timecode."""

# Standard Library Imports
from __future__ import annotations

import enum
import logging
from fractions import Fraction

from .errors import InvalidRateError
from .helpers import RateSource, round_fraction, to_fraction

logger = logging.getLogger(__name__)

#: Playback speed = timebase * NTSC_SCALE for NTSC rates.
NTSC_SCALE = Fraction(1000, 1001)

#: Drop-frame timebases must be a multiple of this value.
DROP_FRAME_TIMEBASE_DIVISOR = 30


#%%
class Ntsc(enum.Enum):
    """The NTSC standard a Framerate adheres to."""

    NONE = "none"
    NON_DROP_FRAME = "ndf"
    DROP_FRAME = "df"

    @property
    def is_ntsc(self) -> bool:
        """Return True for both the drop and non-drop NTSC flavors."""
        return self is not Ntsc.NONE

    def __str__(self) -> str:
        if self is Ntsc.NON_DROP_FRAME:
            return "NTSC NDF"
        if self is Ntsc.DROP_FRAME:
            return "NTSC DF"
        return ""
####


def _is_float_like(value: RateSource) -> bool:
    """Return True for values that can not name a rate exactly.

    Floats, and strings written as floats ("23.98"), only approximate a
    rate. Rationals, Decimals, ints and "N/D" strings are exact.
    """
    if isinstance(value, float):
        return True
    if isinstance(value, str):
        text = value.strip().lower()
        return "/" not in text and any(char in text for char in ".e")
    return False


def _to_rational(value: RateSource) -> Fraction:
    """Convert any supported rate source to a Fraction.

    Raises:
        InvalidRateError: If the value can not be read as a number.
    """
    try:
        if isinstance(value, (tuple, list)):
            numerator, denominator = map(int, value)
            return Fraction(numerator, denominator)
        return to_fraction(value)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        raise InvalidRateError(
            f"could not parse {value!r} as rational, int, or float for framerate"
        ) from e


def _to_playback(value: RateSource, ntsc: Ntsc, is_timebase: bool) -> Fraction:
    """Convert the given rate source to a validated playback speed.

    Args:
        value (RateSource): The playback speed or timebase.
        ntsc (Ntsc): The NTSC standard of the rate.
        is_timebase (bool): True if value is a timecode timebase, False if it
            is a real-world playback speed.

    Raises:
        InvalidRateError: If the value is not a legal rate for the given NTSC
            standard.

    Returns:
        Fraction: The playback speed in frames-per-second.
    """
    float_like = _is_float_like(value)
    if float_like and not ntsc.is_ntsc:
        raise InvalidRateError(
            "float values cannot be parsed for non-NTSC Framerates due to "
            "imprecision"
        )

    rational = _to_rational(value)
    if rational <= 0:
        raise InvalidRateError(
            f"framerates must be positive, got {rational}"
        )

    if not ntsc.is_ntsc:
        return rational

    # NTSC playback given as a float is coerced to the closest legal NTSC
    # rate, 23.98 and 23.976 both mean 24000/1001.
    if float_like and not is_timebase:
        rational = round_fraction(rational) * NTSC_SCALE
        if rational <= 0:
            raise InvalidRateError(f"{value!r} does not round to an NTSC rate")

    if is_timebase:
        timebase = rational
        if timebase.denominator != 1:
            raise InvalidRateError("ntsc timebases must be whole numbers")
    else:
        timebase = rational / NTSC_SCALE
        if timebase.denominator != 1:
            raise InvalidRateError(
                "ntsc playback rates must be a whole number times 1000/1001"
            )

    if ntsc is Ntsc.DROP_FRAME and timebase % DROP_FRAME_TIMEBASE_DIVISOR:
        rate_type = "timebase" if is_timebase else "playback"
        raise InvalidRateError(
            f"dropframe must have {rate_type} divisible by "
            f"{DROP_FRAME_TIMEBASE_DIVISOR * (1 if is_timebase else NTSC_SCALE)} "
            "(multiple of 29.97)"
        )

    return timebase * NTSC_SCALE


def _check_ntsc_rate(fps: Fraction) -> tuple[bool, int]:
    """Check if framerate is NTSC (multiple of 24000/1001 or 30000/1001).

    NTSC rates follow the pattern: nominal_rate * 1000/1001
    Examples: 23.976, 29.97, 47.952, 59.94, 71.928, 89.91, 95.904, 119.88

    Args:
        fps (Fraction): The framerate to check.

    Returns:
        tuple: (is_ntsc, int_framerate) where is_ntsc is True if this is an
            NTSC rate, and int_framerate is the rounded integer framerate.
    """
    # Calculate what the integer framerate would be if this is NTSC
    int_fps = round_fraction(fps / NTSC_SCALE)

    # Whole numbers are never NTSC, even when 1001 * 1000/1001 lands on them
    if fps.denominator == 1 or int_fps <= 0:
        return False, int_fps

    # Check if the input matches expected NTSC rate (within tolerance)
    expected_ntsc = int_fps * NTSC_SCALE
    is_ntsc = abs(fps - expected_ntsc) < Fraction(5, 1000)

    return is_ntsc, int_fps


#%%
class Framerate:
    """The rate at which the frames of a Timecode are played back.

    A Framerate is immutable and may be shared by any number of Timecodes.
    Two Framerates are equal when their playback speed and NTSC standard
    match exactly, the timebase is derived from those two.

    Args:
        playback (RateSource): The real-world playback speed in
            frames-per-second. Floats are only accepted for NTSC rates, and
            are rounded to the nearest legal NTSC speed.
        ntsc (Ntsc): The NTSC standard of this rate. Defaults to Ntsc.NONE.

    Raises:
        InvalidRateError: If the playback speed is not legal for the NTSC
            standard.
    """

    __slots__ = ("_playback", "_ntsc")

    def __init__(self, playback: RateSource, ntsc: Ntsc = Ntsc.NONE) -> None:
        self._playback = _to_playback(playback, ntsc, is_timebase=False)
        self._ntsc = ntsc

    @classmethod
    def _from_exact(cls, playback: Fraction, ntsc: Ntsc) -> Framerate:
        rate = cls.__new__(cls)
        rate._playback = playback
        rate._ntsc = ntsc
        return rate

    @classmethod
    def with_playback(cls, rate: RateSource, ntsc: Ntsc = Ntsc.NONE) -> Framerate:
        """Create a Framerate from a real-world playback speed.

        Args:
            rate (RateSource): The playback speed in frames-per-second, like
                24, "24000/1001", Fraction(30000, 1001) or 23.98.
            ntsc (Ntsc): The NTSC standard to parse the value as.

        Raises:
            InvalidRateError: If the rate is not legal for the NTSC standard.

        Returns:
            Framerate: The new Framerate.
        """
        return cls(rate, ntsc)

    @classmethod
    def with_timebase(cls, base: RateSource, ntsc: Ntsc = Ntsc.NONE) -> Framerate:
        """Create a Framerate from a timecode timebase.

        For NTSC rates the playback speed is the timebase scaled by
        1000/1001, for other rates the two are the same.

        Args:
            base (RateSource): The timebase in frames-per-second. NTSC
                timebases must be whole numbers, drop-frame timebases must
                also be a multiple of 30.
            ntsc (Ntsc): The NTSC standard to parse the value as.

        Raises:
            InvalidRateError: If the timebase is not legal for the NTSC
                standard.

        Returns:
            Framerate: The new Framerate.
        """
        return cls._from_exact(_to_playback(base, ntsc, is_timebase=True), ntsc)

    @classmethod
    def from_fps(
        cls, value: RateSource | Framerate, force_non_drop_frame: bool = False
    ) -> Framerate:
        """Infer a Framerate from a loosely given frames-per-second value.

        Values close to n * 1000/1001 are taken as NTSC. NTSC rates with a
        timebase divisible by 30 (29.97, 59.94, ...) are drop-frame unless
        ``force_non_drop_frame`` is True. The special values "ms" and
        "frames" stand for 1000 and 1 fps. Preset names of
        :mod:`.rates`, like '29.97 NDF' or '59.94 DF', return the preset
        as is.

        Args:
            value (RateSource | Framerate): The frame rate, like '23.976',
                '29.97', '59.94 DF', 25, Fraction(24000, 1001) or
                (30000, 1001). A Framerate is returned unchanged.
            force_non_drop_frame (bool): If True, rates that would default to
                drop-frame are created as NTSC non-drop-frame.

        Raises:
            InvalidRateError: If the value is zero, negative or not a number.

        Returns:
            Framerate: The inferred Framerate.
        """
        if isinstance(value, Framerate):
            return value

        if isinstance(value, str):
            # rates imports this module
            from . import rates

            try:
                rate = rates.lookup(value)
            except InvalidRateError:
                pass
            else:
                logger.debug("looked up preset %s from %r", rate, value)
                return rate

            if value == "ms":
                value = 1000
            elif value == "frames":
                value = 1

        fps = _to_rational(value)
        if fps <= 0:
            raise InvalidRateError("Invalid framerate (zero or negative).")

        is_ntsc, int_fps = _check_ntsc_rate(fps)
        if not is_ntsc:
            rate = cls._from_exact(fps, Ntsc.NONE)
        elif int_fps % DROP_FRAME_TIMEBASE_DIVISOR == 0 and not force_non_drop_frame:
            rate = cls.with_timebase(int_fps, Ntsc.DROP_FRAME)
        else:
            rate = cls.with_timebase(int_fps, Ntsc.NON_DROP_FRAME)

        logger.debug("inferred %s from %r", rate, value)
        return rate

    @property
    def playback(self) -> Fraction:
        """The real-world playback speed in frames-per-second."""
        return self._playback

    @property
    def timebase(self) -> Fraction:
        """The timecode timebase in frames-per-second.

        NTSC timebases are the whole number the playback speed rounds to.
        """
        if self._ntsc.is_ntsc:
            return self._playback / NTSC_SCALE
        return self._playback

    @property
    def ntsc(self) -> Ntsc:
        """The NTSC standard of this Framerate."""
        return self._ntsc

    @property
    def drop_frame(self) -> bool:
        """True if timecodes at this rate use drop-frame numbering."""
        return self._ntsc is Ntsc.DROP_FRAME

    @property
    def drop_frames_per_minute(self) -> int | None:
        """Frame numbers skipped each non-tenth minute, None if not drop-frame.

        Returns:
            int | None: 2 for 29.97, 4 for 59.94 and so on.
        """
        if not self.drop_frame:
            return None
        return int(self.timebase) // DROP_FRAME_TIMEBASE_DIVISOR * 2

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Framerate):
            return self._playback == other._playback and self._ntsc is other._ntsc
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._playback, self._ntsc))

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, name):
            raise AttributeError(f"{__class__.__name__} is immutable")
        super().__setattr__(name, value)

    def __reduce__(self) -> tuple:
        return (__class__._from_exact, (self._playback, self._ntsc))

    def __str__(self) -> str:
        """Return a short label, like '[23.98 NTSC NDF]' or '[24]'."""
        value_str = f"{float(self._playback):.2f}".rstrip("0").rstrip(".")
        ntsc_str = f" {self._ntsc}" if self._ntsc.is_ntsc else ""
        return f"[{value_str}{ntsc_str}]"

    def __repr__(self) -> str:
        return f"{__class__.__name__}({self._playback!r}, Ntsc.{self._ntsc.name})"
####
