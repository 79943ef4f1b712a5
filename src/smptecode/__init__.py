"""SMPTE timecode parsing, formatting and arithmetic."""

import logging

from . import rates
from .errors import (
    IncompatibleRateError,
    InvalidRateError,
    InvalidTimecodeError,
    ParseError,
    TimecodeError,
)
from .formatter import TimecodeSections
from .formatter import timecode as format_timecode
from .framerate import Framerate, Ntsc
from .helpers import PremiereTicks
from .parser import parse
from .timecode import Timecode, TimecodeBuilder

__version__ = "1.0.0"

zero_at = Timecode.zero

__all__ = [
    "Framerate",
    "IncompatibleRateError",
    "InvalidRateError",
    "InvalidTimecodeError",
    "Ntsc",
    "ParseError",
    "PremiereTicks",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "TimecodeSections",
    "format_timecode",
    "parse",
    "rates",
    "zero_at",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
