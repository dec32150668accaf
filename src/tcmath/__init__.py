"""Frame-accurate SMPTE timecode arithmetic."""

from .codec import decode, encode, max_subframes
from .components import Component, Components, decode_string
from .delta import Delta, Sign
from .exceptions import (
    TimecodeError,
    TimecodeInvalidComponentError,
    TimecodeMalformedError,
    TimecodeOutOfRangeError,
    TimecodeRateMismatchError,
)
from .framerate import FrameRate, UpperLimit
from .helpers import Timestamp
from .timecode import Overflow, Timecode, TimecodeBuilder

__version__ = "0.1.0"

__all__ = [
    "Component",
    "Components",
    "Delta",
    "FrameRate",
    "Overflow",
    "Sign",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "TimecodeInvalidComponentError",
    "TimecodeMalformedError",
    "TimecodeOutOfRangeError",
    "TimecodeRateMismatchError",
    "Timestamp",
    "UpperLimit",
    "decode",
    "decode_string",
    "encode",
    "max_subframes",
]
