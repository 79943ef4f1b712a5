"""Helper types and functions for Timecode handling and byproducts."""

from __future__ import annotations

import math
import sys
from decimal import Decimal
from fractions import Fraction

if sys.version_info >= (3, 10):
    _rate_type = Fraction | Decimal | str | float | int | tuple[int, int]
    _number_type = Fraction | Decimal | float | int
else:
    from typing import Tuple, Union
    _rate_type = Union[Fraction, Decimal, str, float, int, Tuple[int, int]]
    _number_type = Union[Fraction, Decimal, float, int]

#: Values accepted where a frame rate is expected.
RateSource = _rate_type
#: Values accepted where an exact number is expected.
Number = _number_type

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * 60

#: Adobe Premiere Pro splits every second into this many ticks.
PREMIERE_TICKS_PER_SECOND = 254016000000

#: 35mm, 4-perf film.
FRAMES_PER_FOOT = 16


class PremiereTicks(int):
    """An int tagged as a Premiere Pro tick count.

    Plain ints are read as frame counts by the parser, wrap the value in
    this class to have it read as ticks instead.
    """

    def __repr__(self) -> str:
        return f"{__class__.__name__}({int(self)})"


def to_fraction(value: Number | str) -> Fraction:
    """Convert the given value to an exact Fraction.

    Floats are converted through their shortest repr, so ``0.1`` becomes
    ``1/10`` and not the binary approximation.

    Args:
        value (Fraction | Decimal | float | int | str): The value to convert.

    Raises:
        ValueError: If the value is not finite or is not a number.
        TypeError: If the type can not be converted.

    Returns:
        Fraction: The exact value.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"{value} is not a finite number")
        return Fraction(repr(value))
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"{value} is not a finite number")
        return Fraction(value)
    if isinstance(value, str):
        return Fraction(value.strip())
    raise TypeError(f"can not convert {value.__class__.__name__} to a fraction")


def round_fraction(value: Fraction) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -round_fraction(-value)
    return math.floor(value + Fraction(1, 2))
