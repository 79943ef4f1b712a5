"""Render a frame count at a given Framerate into each representation."""

from __future__ import annotations

from fractions import Fraction
from typing import NamedTuple

from . import dropframe
from .framerate import Framerate
from .helpers import (
    FRAMES_PER_FOOT,
    PREMIERE_TICKS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    round_fraction,
)


class TimecodeSections(NamedTuple):
    """The individual fields of a timecode string."""

    negative: bool
    hours: int
    minutes: int
    seconds: int
    frames: int


def frame_delimiter(rate: Framerate) -> str:
    """Return the symbol separating seconds and frames.

    Returns:
        str: ";" for drop-frame rates, ":" for everything else.
    """
    return ";" if rate.drop_frame else ":"


def sections(frame_count: int, rate: Framerate) -> TimecodeSections:
    """Split a frame count into timecode fields.

    The fields are computed from the magnitude of the frame count, the sign
    is reported separately. Drop-frame rates are converted to their nominal
    frame number first.

    At a timebase that is not a whole number the frames field is rounded to
    the nearest frame, so parsing the rendered fields back is only exact for
    whole-number timebases.

    Args:
        frame_count (int): The real number of elapsed frames.
        rate (Framerate): The rate of the frames.

    Returns:
        TimecodeSections: The sign, hours, minutes, seconds and frames.
    """
    frames = abs(frame_count)
    timebase = rate.timebase

    if rate.drop_frame:
        frames = dropframe.real_to_display(frames, int(timebase))

    hours, frames = divmod(frames, timebase * SECONDS_PER_HOUR)
    minutes, frames = divmod(frames, timebase * SECONDS_PER_MINUTE)
    seconds, frames = divmod(frames, timebase)

    return TimecodeSections(
        negative=frame_count < 0,
        hours=int(hours),
        minutes=int(minutes),
        seconds=int(seconds),
        frames=round_fraction(Fraction(frames)),
    )


def timecode(frame_count: int, rate: Framerate) -> str:
    """Return the SMPTE timecode string of a frame count.

    Args:
        frame_count (int): The real number of elapsed frames.
        rate (Framerate): The rate of the frames.

    Returns:
        str: The timecode, like "01:00:00:00", "00:01:00;02" for drop-frame
            or "-00:00:01:00" for negative values. Hours do not roll over.
            Only whole-number timebases parse back to the same count, see
            :func:`sections`.
    """
    negative, hrs, mins, secs, frs = sections(frame_count, rate)
    sign = "-" if negative else ""
    return f"{sign}{hrs:02d}:{mins:02d}:{secs:02d}{frame_delimiter(rate)}{frs:02d}"


def seconds(frame_count: int, rate: Framerate) -> Fraction:
    """Return the exact real-world seconds elapsed for a frame count."""
    return Fraction(frame_count) / rate.playback


def runtime(frame_count: int, rate: Framerate, precision: int = 9) -> str:
    """Return the real-world runtime of a frame count as HH:MM:SS.fff.

    Args:
        frame_count (int): The real number of elapsed frames.
        rate (Framerate): The rate of the frames.
        precision (int): The maximum number of fractional second digits.
            The value is rounded half away from zero, trailing zeros are
            trimmed, a whole second renders as ".0".

    Raises:
        ValueError: If precision is negative.

    Returns:
        str: The runtime, like "01:00:03.6".
    """
    if precision < 0:
        raise ValueError(f"precision can not be negative, got {precision}")

    scale = 10 ** precision
    total = round_fraction(abs(seconds(frame_count, rate)) * scale)
    whole_seconds, fraction = divmod(total, scale)

    hrs, whole_seconds = divmod(whole_seconds, SECONDS_PER_HOUR)
    mins, secs = divmod(whole_seconds, SECONDS_PER_MINUTE)

    fraction_str = f"{fraction:0{precision}d}".rstrip("0") if precision else ""
    sign = "-" if frame_count < 0 else ""
    return f"{sign}{hrs:02d}:{mins:02d}:{secs:02d}.{fraction_str or '0'}"


def premiere_ticks(frame_count: int, rate: Framerate) -> int:
    """Return the number of Adobe Premiere Pro ticks for a frame count.

    Premiere tracks time in ticks, 254016000000 to the second regardless
    of the framerate. Values that do not land on a tick are rounded to the
    nearest one.
    """
    return round_fraction(seconds(frame_count, rate) * PREMIERE_TICKS_PER_SECOND)


def feet_and_frames(frame_count: int) -> str:
    """Return the 35mm 4-perf film length of a frame count.

    Args:
        frame_count (int): The real number of elapsed frames.

    Returns:
        str: Feet and frames, like "5400+13" or "-3+14". Frames are padded
            to two digits.
    """
    feet, frames = divmod(abs(frame_count), FRAMES_PER_FOOT)
    sign = "-" if frame_count < 0 else ""
    return f"{sign}{feet}+{frames:02d}"
