"""Exceptions raised by smptecode."""


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class InvalidRateError(TimecodeError):
    """Raised when a Framerate can not be built from the given values."""


class ParseError(TimecodeError):
    """Raised when a value can not be parsed into a frame count."""


class InvalidTimecodeError(ParseError):
    """Raised when a drop-frame timecode names a skipped frame number."""


class IncompatibleRateError(TimecodeError):
    """Raised when two Timecodes with different Framerates are combined."""
