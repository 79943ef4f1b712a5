"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import logging
import sys
from decimal import Decimal
from fractions import Fraction

from . import dropframe, formatter, parser
from .errors import IncompatibleRateError
from .formatter import TimecodeSections
from .framerate import Framerate
from .helpers import Number, RateSource, round_fraction, to_fraction

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (int, Fraction, Decimal, float)


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is the
    real number of frames elapsed since 00:00:00:00, then when required it
    converts the frames to a timecode, runtime, ticks or feet+frames by using
    the frame rate. Timecodes are immutable, every operation returns a new
    instance.

    Args:
        rate (Framerate | RateSource): The frame rate of the Timecode
            instance. Anything other than a Framerate is handed to
            :meth:`.Framerate.from_fps`, so '23.976', '29.97' (drop-frame),
            25 or Fraction(24000, 1001) are all accepted. Can not be skipped.
        value (None | str | int | Fraction | float | Timecode): The value to
            parse. Strings may be a timecode ('01:00:00:00', '3:12',
            '00:01:00;02'), a runtime ('01:00:03.6', '1.5'), a frame count
            ('86400') or feet+frames ('5400+00'). Ints are frame counts,
            Fractions, Decimals and floats are seconds. A Timecode gives its
            frame count.
        frames (int): The number of frames. Used if value is skipped.
        seconds (int | float | Fraction | Decimal | str): The seconds, rounded
            to the nearest frame. Used if value and frames are skipped.
        premiere_ticks (int | str): The Adobe Premiere Pro ticks. Used if
            value, frames and seconds are skipped. If everything is skipped
            the Timecode is 00:00:00:00.
        force_non_drop_frame (bool): If True, a loosely given NTSC rate like
            '29.97' is created as non-drop-frame. Has no meaning when rate is
            a Framerate. It is False by default.

    Raises:
        ParseError: If the value can not be parsed.
        InvalidRateError: If the rate can not be converted to a Framerate.
    """

    __slots__ = ("_frames", "_rate")

    def __init__(
        self,
        rate: Framerate | RateSource,
        value: str | Number | Timecode | None = None,
        *,
        frames: int | None = None,
        seconds: Number | str | None = None,
        premiere_ticks: int | str | None = None,
        force_non_drop_frame: bool = False,
    ) -> None:
        self._rate = Framerate.from_fps(rate, force_non_drop_frame)
        self._frames = self._dispatch_frames(
            value=value,
            frames=frames,
            seconds=seconds,
            premiere_ticks=premiere_ticks,
        )
    ####

    def _dispatch_frames(self, **kwargs) -> int:
        """Helper to dispatch the arguments to compute the frame count.

        Args:
            kwargs (dict): dictionary of possible input values to set the frame
            count. The following order of priority applies:
                1. value: anything :func:`.parser.parse` accepts, or a
                   Timecode.
                2. frames: frames count of the Timecode.
                3. seconds: seconds or a runtime string.
                4. premiere_ticks: Premiere Pro tick count.

        Returns:
            int: The frame count, 0 if no argument was given.
        """
        if (value := kwargs.get("value")) is not None:
            if isinstance(value, Timecode):
                return value.frames
            return parser.parse(value, self._rate)
        if (frames := kwargs.get("frames")) is not None:
            return parser.parse_frames(frames, self._rate)
        if (seconds := kwargs.get("seconds")) is not None:
            return parser.parse_seconds(seconds, self._rate)
        if (premiere_ticks := kwargs.get("premiere_ticks")) is not None:
            return parser.parse_premiere_ticks(premiere_ticks, self._rate)
        return 0

    @classmethod
    def _from_frames(cls, frames: int, rate: Framerate) -> Self:
        tc = cls.__new__(cls)
        tc._frames = frames
        tc._rate = rate
        return tc

    @classmethod
    def with_frames(cls, frames: int | str, rate: Framerate | RateSource) -> Self:
        """Create a Timecode from a frame-count value.

        Args:
            frames (int | str): An int, or a timecode, feet+frames or digit
                string.
            rate (Framerate | RateSource): The frame rate.

        Returns:
            Timecode: The new Timecode.
        """
        return cls(rate, frames=frames)

    @classmethod
    def with_seconds(cls, seconds: Number | str, rate: Framerate | RateSource) -> Self:
        """Create a Timecode from seconds, rounded to the nearest frame.

        Args:
            seconds (int | float | Fraction | Decimal | str): The seconds, or
                a runtime string like '01:00:03.6'.
            rate (Framerate | RateSource): The frame rate.

        Returns:
            Timecode: The new Timecode.
        """
        return cls(rate, seconds=seconds)

    @classmethod
    def with_premiere_ticks(
        cls, ticks: int | str, rate: Framerate | RateSource
    ) -> Self:
        """Create a Timecode from Premiere Pro ticks, rounded to the nearest frame.

        Args:
            ticks (int | str): The tick count.
            rate (Framerate | RateSource): The frame rate.

        Returns:
            Timecode: The new Timecode.
        """
        return cls(rate, premiere_ticks=ticks)

    @classmethod
    def zero(cls, rate: Framerate | RateSource) -> Self:
        """Return the 00:00:00:00 Timecode at the given rate."""
        return cls(rate)

    @property
    def rate(self) -> Framerate:
        """Return the Framerate of this Timecode.

        Returns:
            Framerate: The frame rate.
        """
        return self._rate

    @property
    def frames(self) -> int:
        """Return the number of frames elapsed since 00:00:00:00.

        Returns:
            int: The real frame count, negative for negative timecodes.
        """
        return self._frames

    @property
    def seconds(self) -> Fraction:
        """Return the real-world seconds elapsed since 00:00:00:00.

        Returns:
            Fraction: The exact seconds.
        """
        return formatter.seconds(self._frames, self._rate)

    @property
    def timecode(self) -> str:
        """Return the SMPTE timecode string.

        Returns:
            str: The timecode, like '01:00:00:00' or '00:01:00;02'.
        """
        return formatter.timecode(self._frames, self._rate)

    def runtime(self, precision: int = 9) -> str:
        """Return the true runtime of the Timecode in HH:MM:SS.fff format.

        Args:
            precision (int): The maximum number of fractional second digits.

        Returns:
            str: The runtime, like '01:00:03.6'.
        """
        return formatter.runtime(self._frames, self._rate, precision)

    @property
    def premiere_ticks(self) -> int:
        """Return the number of Adobe Premiere Pro ticks elapsed.

        Returns:
            int: The tick count, 254016000000 per second.
        """
        return formatter.premiere_ticks(self._frames, self._rate)

    @property
    def feet_and_frames(self) -> str:
        """Return the 35mm 4-perf footage of the Timecode.

        Returns:
            str: The footage, like '5400+13'.
        """
        return formatter.feet_and_frames(self._frames)

    @property
    def sections(self) -> TimecodeSections:
        """Return the individual fields of the timecode string.

        Returns:
            TimecodeSections: The sign, hours, minutes, seconds and frames.
        """
        return formatter.sections(self._frames, self._rate)

    @property
    def hrs(self) -> int:
        """Return the hours part of the timecode.

        Returns:
            int: The hours part of the timecode.
        """
        return self.sections.hours

    @property
    def mins(self) -> int:
        """Return the minutes part of the timecode.

        Returns:
            int: The minutes part of the timecode.
        """
        return self.sections.minutes

    @property
    def secs(self) -> int:
        """Return the seconds part of the timecode.

        Returns:
            int: The seconds part of the timecode.
        """
        return self.sections.seconds

    @property
    def frs(self) -> int:
        """Return the frames part of the timecode.

        Returns:
            int: The frames part of the timecode.
        """
        return self.sections.frames

    @property
    def frame_number(self) -> int:
        """Return the nominal frame number of the current timecode instance.

        This is the frame count as if no drop-frame numbers were skipped. It
        equals :attr:`frames` for every rate that is not drop-frame.

        Returns:
            int: The nominal frame number.
        """
        if self._rate.drop_frame:
            return dropframe.real_to_display(self._frames, int(self._rate.timebase))
        return self._frames

    @property
    def float(self) -> float:
        """Return the seconds as float.

        Returns:
            float: The seconds as float.
        """
        return float(self)

    def next(self) -> Self:
        """Return the Timecode of the next frame.

        Returns:
            Timecode: A new Timecode one frame after this one.
        """
        return self + 1

    def back(self) -> Self:
        """Return the Timecode of the previous frame.

        Returns:
            Timecode: A new Timecode one frame before this one.
        """
        return self - 1

    def rebase(self, rate: Framerate | RateSource, preserve_seconds: bool = False) -> Self:
        """Return this Timecode at a different Framerate.

        Args:
            rate (Framerate | RateSource): The new frame rate.
            preserve_seconds (bool): If False, the default, the frame count is
                kept, so '01:00:00:00' at 120 fps NTSC is '02:00:00:00' at
                59.94 NTSC. If True, the frame count is recalculated so the
                real-world seconds are kept as closely as whole frames allow.

        Returns:
            Timecode: The rebased Timecode.
        """
        rate = Framerate.from_fps(rate)
        if preserve_seconds:
            frames = parser.seconds_to_frames(self.seconds, rate)
        else:
            frames = self._frames
        logger.debug("rebased %r to %s, %d frames", self, rate, frames)
        return self._from_frames(frames, rate)

    def abs(self) -> Self:
        """Return the absolute value of this Timecode.

        Returns:
            Timecode: A Timecode with a non-negative frame count.
        """
        return self._from_frames(abs(self._frames), self._rate)

    def _coerce(self, other: object) -> Timecode:
        """Convert the other operand of a comparison to a Timecode.

        Ints are frame counts and strs are parsed, both at the rate of this
        instance.

        Raises:
            TypeError: If the other operand is of an unsupported type.
        """
        if isinstance(other, Timecode):
            return other
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return Timecode(self._rate, other)
        raise TypeError(
            f"Type {other.__class__.__name__} not supported for comparison."
        )

    def _compare_key(self, other: Timecode) -> tuple[int | Fraction, int | Fraction]:
        """Return the two values to compare: frames at equal rates, else seconds."""
        if self._rate == other._rate:
            return self._frames, other._frames
        return self.seconds, other.seconds

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Args:
            other (int | str | Timecode): Either an int representing the
                number of frames, a str representing a Timecode with the same
                frame rate of this one, or a Timecode. Timecodes at different
                rates are equal when they represent the same seconds.

        Only equality between Timecodes is consistent with :meth:`__hash__`.
        ``tc == 24`` may be True while ``hash(tc) != hash(24)``, so ints and
        strs can not stand in for a Timecode as dict or set keys.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        try:
            other = self._coerce(other)
        except TypeError:
            return NotImplemented
        mine, theirs = self._compare_key(other)
        return mine == theirs

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: int | str | Timecode) -> bool:
        """Override less than operator.

        Args:
            other (int | str | Timecode): Either an int representing the
                number of frames, a str representing a Timecode with the same
                frame rate of this one, or a Timecode.

        Returns:
            bool: True if this Timecode instance is less than the other.
        """
        mine, theirs = self._compare_key(self._coerce(other))
        return mine < theirs

    def __le__(self, other: int | str | Timecode) -> bool:
        """Override less than or equal to operator.

        Returns:
            bool: True if this Timecode instance is less than or equal to the
                other.
        """
        mine, theirs = self._compare_key(self._coerce(other))
        return mine <= theirs

    def __gt__(self, other: int | str | Timecode) -> bool:
        """Override greater than operator.

        Returns:
            bool: True if this Timecode instance is greater than the other.
        """
        mine, theirs = self._compare_key(self._coerce(other))
        return mine > theirs

    def __ge__(self, other: int | str | Timecode) -> bool:
        """Override greater than or equal to operator.

        Returns:
            bool: True if this Timecode instance is greater than or equal to
                the other.
        """
        mine, theirs = self._compare_key(self._coerce(other))
        return mine >= theirs

    def __hash__(self) -> int:
        """Hash the exact seconds, equal Timecodes at any rate hash equal."""
        return hash(self.seconds)

    def _operand_frames(self, other: object, operation: str) -> int | None:
        """Return the frame count of an add/sub operand, None if unsupported.

        Raises:
            IncompatibleRateError: If other is a Timecode at another rate.
        """
        if isinstance(other, Timecode):
            if other._rate != self._rate:
                raise IncompatibleRateError(
                    f"can not {operation} {other!r} and {self!r}, rebase one of "
                    "them first"
                )
            return other._frames
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __add__(self, other: int | Timecode) -> Self:
        """Return a new Timecode with the given timecode or frames added to this one.

        Args:
            other (int | Timecode): Either an int value or a Timecode in which
                the frames are used for the calculation.

        Raises:
            IncompatibleRateError: If the other is a Timecode at a different
                rate.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        frames = self._operand_frames(other, "add")
        if frames is None:
            return NotImplemented
        return self._from_frames(self._frames + frames, self._rate)

    def __radd__(self, other: int) -> Self:
        return self.__add__(other)

    def __sub__(self, other: int | Timecode) -> Self:
        """Return a new Timecode instance with subtracted value.

        Args:
            other (int | Timecode): The number to subtract, either an integer or
                another Timecode in which the number of frames is subtracted.

        Raises:
            IncompatibleRateError: If the other is a Timecode at a different
                rate.

        Returns:
            Timecode: The resultant Timecode instance, negative if other is
                larger.
        """
        frames = self._operand_frames(other, "subtract")
        if frames is None:
            return NotImplemented
        return self._from_frames(self._frames - frames, self._rate)

    def __rsub__(self, other: int) -> Self:
        frames = self._operand_frames(other, "subtract")
        if frames is None:
            return NotImplemented
        return self._from_frames(frames - self._frames, self._rate)

    @staticmethod
    def _scalar(other: object) -> Fraction | None:
        if isinstance(other, bool) or not isinstance(other, _SCALAR_TYPES):
            return None
        return to_fraction(other)

    def __mul__(self, other: Number) -> Self:
        """Return a new Timecode instance with multiplied value.

        Args:
            other (int | Fraction | Decimal | float): The multiplier. The
                result is rounded to the nearest frame, halves away from zero.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        return self._from_frames(round_fraction(self._frames * scalar), self._rate)

    def __rmul__(self, other: Number) -> Self:
        return self.__mul__(other)

    def __divmod__(self, other: Number) -> tuple[Self, Self]:
        """Return the quotient and remainder of dividing the frame count.

        The quotient is truncated toward zero, the remainder is the signed
        frame residue, rounded to the nearest frame.

        Args:
            other (int | Fraction | Decimal | float): The divisor.

        Raises:
            ZeroDivisionError: If other is zero.

        Returns:
            tuple: The quotient and remainder Timecodes.
        """
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        quotient = int(self._frames / scalar)
        remainder = round_fraction(self._frames - quotient * scalar)
        return (
            self._from_frames(quotient, self._rate),
            self._from_frames(remainder, self._rate),
        )

    def __truediv__(self, other: Number) -> Self:
        """Return a new Timecode instance with divided value.

        Args:
            other (int | Fraction | Decimal | float): The divisor. The frame
                count is truncated toward zero.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        result = self.__divmod__(other)
        if result is NotImplemented:
            return result
        return result[0]

    __floordiv__ = __truediv__

    def __mod__(self, other: Number) -> Self:
        """Return the remainder of dividing this Timecode.

        Returns:
            Timecode: The frames left over by :meth:`__truediv__`.
        """
        result = self.__divmod__(other)
        if result is NotImplemented:
            return result
        return result[1]

    def __neg__(self) -> Self:
        return self._from_frames(-self._frames, self._rate)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return self.abs()

    def __float__(self) -> float:
        """Convert this Timecode instance to a float representation (seconds).

        Returns:
            float: The float representation (seconds).
        """
        return float(self.seconds)

    def __int__(self) -> int:
        return self._frames

    def __bool__(self) -> bool:
        return self._frames != 0

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return self.timecode

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        # use frames= as that is agnostic to drop_frame
        return f"{__class__.__name__}({self._rate!r}, frames={self._frames})"
####

#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    A list of kwargs of class Timecode can be provided to the builder, which
    will be used when the builder instance is called to create new Timecodes.

    Args:
        kwargs (dict): list of pre-configured arguments for the Timecodes
        instantiated by calling this builder, ``rate`` is required either here
        or on each call. Refer to Timecode docu.
    """

    def __init__(self, **kwargs) -> None:
        if "rate" in kwargs:
            kwargs["rate"] = Framerate.from_fps(
                kwargs["rate"], kwargs.pop("force_non_drop_frame", False)
            )
        self.kwargs = kwargs

    def __call__(self, value: str | Number | Timecode | None = None, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Args:
            value (None | str | int | Fraction | float | Timecode): The value
                to parse at the configured rate.

        Raises:
            TypeError: If no rate was configured or given.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        if "rate" not in kwargs:
            raise TypeError("TimecodeBuilder needs a rate to build a Timecode")
        return Timecode(value=value, **kwargs)
####
