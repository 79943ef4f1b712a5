"""Drop-frame frame numbering.

At NTSC drop-frame rates (29.97, 59.94, ...) the frame numbers 00 and 01
(00-03 at 59.94, and so on) are skipped at the start of every minute that is
not a multiple of ten, so the displayed timecode stays in step with the wall
clock. No frame is lost, only its number.

The functions here map between the real frame count stored by a Timecode
and the nominal frame number used to build the HH:MM:SS:FF fields.

Algorithm adapted from:
https://www.davidheidelberger.com/2010/06/10/drop-frame-timecode/
"""

from __future__ import annotations

from .errors import InvalidTimecodeError
from .helpers import SECONDS_PER_MINUTE


def drop_frames_per_minute(timebase: int) -> int:
    """Return the number of frame numbers skipped on each dropping minute.

    Args:
        timebase (int): The drop-frame timebase, a multiple of 30.

    Raises:
        ValueError: If the timebase is not a positive multiple of 30.

    Returns:
        int: 2 for a timebase of 30, 4 for 60 and so on.
    """
    if timebase <= 0 or timebase % 30:
        raise ValueError(
            f"drop-frame timebase must be a positive multiple of 30, got {timebase}"
        )
    return timebase // 30 * 2


def real_to_display(frame_count: int, timebase: int) -> int:
    """Convert a real frame count to a nominal drop-frame frame number.

    Args:
        frame_count (int): The number of frames elapsed since 00:00:00;00.
            Negative counts are mapped by their magnitude.
        timebase (int): The drop-frame timebase, a multiple of 30.

    Returns:
        int: The frame number as if no frame numbers were skipped, ready to
            be split into hours, minutes, seconds and frames.
    """
    if frame_count < 0:
        return -real_to_display(-frame_count, timebase)

    drop_frames = drop_frames_per_minute(timebase)

    # Real frames in a minute that starts with dropped numbers
    frames_per_minute = timebase * SECONDS_PER_MINUTE - drop_frames
    # Nine dropping minutes plus one whole minute
    frames_per_10_minutes = frames_per_minute * 10 + drop_frames

    tens_of_minutes, remainder = divmod(frame_count, frames_per_10_minutes)
    adjustment = drop_frames * 9 * tens_of_minutes
    if remainder > drop_frames:
        adjustment += drop_frames * ((remainder - drop_frames) // frames_per_minute)

    return frame_count + adjustment


def display_to_real(frame_number: int, timebase: int) -> int:
    """Convert a nominal drop-frame frame number to a real frame count.

    This is the exact inverse of :func:`real_to_display`.

    Args:
        frame_number (int): The frame number computed from HH:MM:SS:FF
            fields as if no frame numbers were skipped. Negative numbers are
            mapped by their magnitude.
        timebase (int): The drop-frame timebase, a multiple of 30.

    Raises:
        InvalidTimecodeError: If the frame number is one of the numbers
            skipped by the drop-frame convention.

    Returns:
        int: The number of frames elapsed since 00:00:00;00.
    """
    if frame_number < 0:
        return -display_to_real(-frame_number, timebase)

    drop_frames = drop_frames_per_minute(timebase)
    total_minutes, minute_frames = divmod(frame_number, timebase * SECONDS_PER_MINUTE)

    if is_dropped(frame_number, timebase):
        raise InvalidTimecodeError(
            f"drop-frame tc cannot have a frames value of less than "
            f"{drop_frames} on minutes not divisible by 10, found "
            f"'{minute_frames:02d}' at minute {total_minutes}"
        )

    return frame_number - drop_frames * (total_minutes - total_minutes // 10)


def is_dropped(frame_number: int, timebase: int) -> bool:
    """Return True if the nominal frame number is skipped in drop-frame."""
    total_minutes, minute_frames = divmod(
        abs(frame_number), timebase * SECONDS_PER_MINUTE
    )
    return bool(total_minutes % 10) and minute_frames < drop_frames_per_minute(timebase)
