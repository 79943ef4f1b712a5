"""Parse timecode, runtime, feet+frames, tick and number values into frames.

Every parser returns the real frame count the value represents at the given
Framerate. Strings are dispatched on their syntax:

    1. ``:``, ``;`` or ``+`` present: timecode ("01:00:00:00", "3:12",
       "00:01:00;02"), feet+frames ("5400+00") or runtime with sections
       ("01:00:03.6").
    2. ``.`` present: runtime in seconds ("3603.6").
    3. Otherwise: a frame count ("86400").

Any string may start with "-" to give a negative value.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from fractions import Fraction

from . import dropframe
from .errors import ParseError
from .framerate import Framerate
from .helpers import (
    FRAMES_PER_FOOT,
    PREMIERE_TICKS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    Number,
    PremiereTicks,
    round_fraction,
    to_fraction,
)

logger = logging.getLogger(__name__)

TIMECODE_REGEX = re.compile(
    r"^(?P<negative>-)?"
    r"((?P<section1>[0-9]+)[:;])?"
    r"((?P<section2>[0-9]+)[:;])?"
    r"((?P<section3>[0-9]+)[:;])?"
    r"(?P<frames>[0-9]+)$"
)

FEET_AND_FRAMES_REGEX = re.compile(
    r"^(?P<negative>-)?(?P<feet>[0-9]+)\+(?P<frames>[0-9]+)$"
)

RUNTIME_REGEX = re.compile(
    r"^(?P<negative>-)?"
    r"((?P<section1>[0-9]+)[:;])?"
    r"((?P<section2>[0-9]+)[:;])?"
    r"(?P<seconds>[0-9]+(\.[0-9]+)?)$"
)

FRAME_COUNT_REGEX = re.compile(r"^(?P<negative>-)?(?P<frames>[0-9]+)$")


def _right_aligned(match: re.Match, names: tuple[str, ...]) -> list[int]:
    """Return the optional sections of a match, missing ones filled with 0.

    Partial values like "3:12" fill the right-most sections first, so the
    present sections are shifted right and padded on the left.
    """
    present = [int(match[name]) for name in names if match[name] is not None]
    return [0] * (len(names) - len(present)) + present


def seconds_to_frames(seconds: Fraction, rate: Framerate) -> int:
    """Return the frame count closest to the given real-world seconds."""
    return round_fraction(seconds * rate.playback)


def parse_timecode(value: str, rate: Framerate) -> int:
    """Parse a full or partial SMPTE timecode string.

    Args:
        value (str): The timecode, like "01:00:00:00", "1:13:4", "3:12" or
            "-00:01:00;02". The hours, minutes and seconds fields may
            overflow, "00:00:62:04" is "00:01:02:04".
        rate (Framerate): The rate of the timecode.

    Raises:
        ParseError: If the string is not a timecode or the frames field is
            not lower than the timebase.
        InvalidTimecodeError: If the value names a frame number skipped by
            drop-frame numbering.

    Returns:
        int: The real frame count.
    """
    match = TIMECODE_REGEX.match(value.strip())
    if match is None:
        raise ParseError(f"{value!r} is not a known timecode format")

    hours, minutes, seconds = _right_aligned(
        match, ("section1", "section2", "section3")
    )
    frames = int(match["frames"])

    timebase = rate.timebase
    if frames >= timebase:
        raise ParseError(
            f"timecode {value!r} has a frames value of {frames}, frames must "
            f"be lower than the timebase ({timebase})"
        )

    total_seconds = seconds + minutes * SECONDS_PER_MINUTE + hours * SECONDS_PER_HOUR
    frame_number = round_fraction(total_seconds * timebase + frames)

    if rate.drop_frame:
        frame_number = dropframe.display_to_real(frame_number, int(timebase))

    return -frame_number if match["negative"] else frame_number


def parse_feet_and_frames(value: str) -> int:
    """Parse a 35mm 4-perf feet+frames string, like "5400+13" or "-3+14".

    Raises:
        ParseError: If feet and frames are not both whole numbers.
    """
    match = FEET_AND_FRAMES_REGEX.match(value.strip())
    if match is None:
        raise ParseError(
            f"{value!r} is not a known feet+frames format, feet and frames "
            "must be whole numbers separated by '+'"
        )

    frames = int(match["feet"]) * FRAMES_PER_FOOT + int(match["frames"])
    return -frames if match["negative"] else frames


def parse_runtime(value: str) -> Fraction:
    """Parse a runtime string into exact seconds.

    Args:
        value (str): The runtime, like "01:00:03.6", "2:03.5" or "3603.6".

    Raises:
        ParseError: If the string is not a runtime.

    Returns:
        Fraction: The seconds the runtime represents.
    """
    match = RUNTIME_REGEX.match(value.strip())
    if match is None:
        raise ParseError(f"{value!r} is not a known runtime format")

    hours, minutes = _right_aligned(match, ("section1", "section2"))
    seconds = (
        Fraction(match["seconds"])
        + minutes * SECONDS_PER_MINUTE
        + hours * SECONDS_PER_HOUR
    )
    return -seconds if match["negative"] else seconds


def parse_frame_count(value: str) -> int:
    """Parse a string holding a signed whole number of frames."""
    match = FRAME_COUNT_REGEX.match(value.strip())
    if match is None:
        raise ParseError(f"{value!r} is not a whole number of frames")
    frames = int(match["frames"])
    return -frames if match["negative"] else frames


def _parse_str(value: str, rate: Framerate) -> int:
    text = value.strip()
    if not text:
        raise ParseError("can not parse an empty string")

    if "+" in text:
        logger.debug("parsing %r as feet+frames", text)
        return parse_feet_and_frames(text)

    if ":" in text or ";" in text:
        if "." in text:
            logger.debug("parsing %r as runtime", text)
            return seconds_to_frames(parse_runtime(text), rate)
        logger.debug("parsing %r as timecode", text)
        return parse_timecode(text, rate)

    if "." in text:
        logger.debug("parsing %r as runtime", text)
        return seconds_to_frames(parse_runtime(text), rate)

    logger.debug("parsing %r as frame count", text)
    return parse_frame_count(text)


def _number_to_seconds(value: Number) -> Fraction:
    try:
        return to_fraction(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"could not convert {value!r} to seconds: {e}") from e


def parse(value: str | Number | PremiereTicks, rate: Framerate) -> int:
    """Parse any supported value into a frame count.

    Args:
        value (str | int | Fraction | Decimal | float | PremiereTicks): The
            value to parse. Strings are dispatched on their syntax (see the
            module docstring), ints are frame counts, Fractions, Decimals
            and floats are seconds and :class:`PremiereTicks` are Premiere
            Pro ticks.
        rate (Framerate): The rate to parse the value at.

    Raises:
        ParseError: If the value does not match any accepted format.
        InvalidTimecodeError: If a drop-frame timecode names a skipped frame
            number.

    Returns:
        int: The real frame count.
    """
    if isinstance(value, bool):
        raise ParseError("bool values can not be parsed as timecode")
    if isinstance(value, PremiereTicks):
        return parse_premiere_ticks(value, rate)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, (Fraction, Decimal, float)):
        return seconds_to_frames(_number_to_seconds(value), rate)
    if isinstance(value, str):
        return _parse_str(value, rate)
    raise ParseError(
        f"Type {value.__class__.__name__} not supported for timecode parsing."
    )


def parse_frames(value: str | int, rate: Framerate) -> int:
    """Parse a frame-count value: an int, a timecode, feet+frames or digits.

    Raises:
        ParseError: If the value is not a frame-count format. Runtimes are
            rejected, use :func:`parse_seconds` for those.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ParseError(
            f"{value!r} is not a frame count, timecode or feet+frames value"
        )
    if isinstance(value, str) and "." in value:
        raise ParseError(
            f"{value!r} is not a known frame-count timecode format"
        )
    if isinstance(value, int):
        return int(value)
    return _parse_str(value, rate)


def parse_seconds(value: str | Number, rate: Framerate) -> int:
    """Parse a seconds value or runtime string into the nearest frame count.

    Args:
        value (str | int | Fraction | Decimal | float): Seconds as a number,
            or a runtime string like "01:00:03.6" or "3603.6".
        rate (Framerate): The rate to count frames at.

    Raises:
        ParseError: If the value is not a seconds value.

    Returns:
        int: The frame count closest to the given seconds.
    """
    if isinstance(value, str):
        seconds = parse_runtime(value)
    elif isinstance(value, bool):
        raise ParseError("bool values can not be parsed as seconds")
    else:
        seconds = _number_to_seconds(value)
    return seconds_to_frames(seconds, rate)


def parse_premiere_ticks(value: int | str, rate: Framerate) -> int:
    """Parse a Premiere Pro tick count into the nearest frame count.

    Raises:
        ParseError: If the value is not a whole number of ticks.
    """
    if isinstance(value, str):
        match = FRAME_COUNT_REGEX.match(value.strip())
        if match is None:
            raise ParseError(f"{value!r} is not a whole number of ticks")
        value = int(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"{value!r} is not a whole number of ticks")

    seconds = Fraction(int(value), PREMIERE_TICKS_PER_SECOND)
    return seconds_to_frames(seconds, rate)
