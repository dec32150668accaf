"""Timecode exception classes."""

from __future__ import annotations


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class TimecodeOutOfRangeError(TimecodeError):
    """A frame count fell outside the range allowed by the upper limit."""


class TimecodeRateMismatchError(TimecodeError):
    """Two timecodes with different frame rates were combined."""


class TimecodeMalformedError(TimecodeError, ValueError):
    """A string could not be decoded into timecode components."""


class TimecodeInvalidComponentError(TimecodeError, ValueError):
    """One or more timecode components exceed their legal bounds.

    Args:
        message (str): The error message.
        components (set): The offending :class:`.Component` fields.
    """

    def __init__(self, message: str, components: set | None = None) -> None:
        super().__init__(message)
        self.components = set(components or ())
