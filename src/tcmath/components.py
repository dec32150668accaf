"""The timecode component record and its string/range helpers."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields, replace
from enum import Enum

from .exceptions import TimecodeMalformedError
from .framerate import FrameRate, UpperLimit

logger = logging.getLogger(__name__)

_TIMECODE_PATTERN = re.compile(
    r"^(?:(?P<days>\d+)\s+)?"
    r"(?P<hours>\d+)[:;](?P<minutes>\d+)[:;](?P<seconds>\d+)[:;](?P<frames>\d+)"
    r"(?:\.(?P<subframes>\d+))?$"
)


class Component(Enum):
    """The individual fields of a timecode."""

    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    FRAMES = "frames"
    SUBFRAMES = "subframes"


@dataclass
class Components:
    """Days, hours, minutes, seconds, frames and subframes of a timecode.

    This is plain data: the values are not checked against any frame rate
    and may be out of range or negative, for example when the record is
    used as a duration to add to a Timecode.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0
    subframes: int = 0

    @classmethod
    def from_string(cls, timecode: str) -> Components:
        """Decode a timecode string into components.

        The accepted shape is ``[D ]HH:MM:SS:FF[.SF]``, where any of the
        field separators may be ":" or ";". The values are not range
        checked.

        Args:
            timecode (str): The timecode string.

        Raises:
            TimecodeMalformedError: If the string does not have the shape of
                a timecode.

        Returns:
            Components: The decoded components.
        """
        match = _TIMECODE_PATTERN.match(timecode.strip())
        if match is None:
            raise TimecodeMalformedError(
                f"Can not decode {timecode!r} into timecode components."
            )
        values = {k: int(v) for k, v in match.groupdict().items() if v is not None}
        return cls(**values)

    def get(self, component: Component) -> int:
        return getattr(self, component.value)

    def as_tuple(self) -> tuple[int, int, int, int, int, int]:
        return (
            self.days, self.hours, self.minutes,
            self.seconds, self.frames, self.subframes,
        )

    def valid_range(
        self,
        component: Component,
        frame_rate: FrameRate,
        limit: UpperLimit,
        subframes_divisor: int,
    ) -> range:
        """Return the legal values of one field for the given settings.

        For drop-frame rates, the frames field at second zero of a minute
        that is not a multiple of ten starts after the skipped frame
        numbers, so the valid range depends on the other fields.

        Args:
            component (Component): The field to query.
            frame_rate (FrameRate): The frame rate.
            limit (UpperLimit): The range limit.
            subframes_divisor (int): Subframes per frame.

        Returns:
            range: The valid values.
        """
        if component is Component.DAYS:
            return range(limit.max_days)
        if component is Component.HOURS:
            return range(24)
        if component in (Component.MINUTES, Component.SECONDS):
            return range(60)
        if component is Component.SUBFRAMES:
            return range(subframes_divisor)

        first = 0
        if frame_rate.is_drop and self.seconds == 0 and self.minutes % 10 != 0:
            first = frame_rate.frames_dropped_per_minute
        return range(first, frame_rate.fps)

    def invalid_components(
        self,
        frame_rate: FrameRate,
        limit: UpperLimit,
        subframes_divisor: int,
    ) -> set[Component]:
        """Return the fields whose values are out of range.

        Args:
            frame_rate (FrameRate): The frame rate.
            limit (UpperLimit): The range limit.
            subframes_divisor (int): Subframes per frame.

        Returns:
            set: The invalid :class:`Component` fields, empty when valid.
        """
        return {
            component
            for component in Component
            if self.get(component)
            not in self.valid_range(component, frame_rate, limit, subframes_divisor)
        }

    def clamped(
        self,
        frame_rate: FrameRate,
        limit: UpperLimit,
        subframes_divisor: int,
    ) -> Components:
        """Return a copy with every field clamped into its valid range."""
        values = {}
        for field in fields(self):
            component = Component(field.name)
            valid = self.valid_range(component, frame_rate, limit, subframes_divisor)
            value = self.get(component)
            values[field.name] = min(max(value, valid.start), valid.stop - 1)
        result = replace(self, **values)
        # the frames range may have moved if seconds or minutes were clamped
        frames = result.valid_range(
            Component.FRAMES, frame_rate, limit, subframes_divisor
        )
        if result.frames < frames.start:
            result.frames = frames.start
        if result != self:
            logger.debug("Clamped components %s to %s", self, result)
        return result


def decode_string(timecode: str) -> Components:
    """Decode a timecode string into components without validating them.

    Args:
        timecode (str): The timecode string, like "01:00:00;02" or
            "2 10:00:00:00.50".

    Returns:
        Components: The decoded components.
    """
    return Components.from_string(timecode)
