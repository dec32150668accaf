"""Signed distance between two timecodes."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .codec import max_subframes

if TYPE_CHECKING:
    from .framerate import UpperLimit
    from .timecode import Timecode


class Sign(Enum):
    POSITIVE = "+"
    NEGATIVE = "-"


class Delta:
    """A timecode magnitude paired with a sign.

    Args:
        delta (Timecode): The unsigned distance.
        sign (Sign): The direction of the distance.
        limit (UpperLimit): The range that :attr:`timecode` wraps in.
            Defaults to the limit of ``delta``.
    """

    def __init__(
        self,
        delta: Timecode,
        sign: Sign = Sign.POSITIVE,
        limit: UpperLimit | None = None,
    ) -> None:
        self.delta = delta
        self.sign = sign
        self.limit = limit or delta.limit

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def subframes(self) -> int:
        """The signed distance in subframe units."""
        total = self.delta.subframes_total
        return -total if self.is_negative else total

    @property
    def frames(self) -> int:
        """The signed distance in whole frames, truncated toward zero."""
        total = self.delta.subframes_total // self.delta.subframes_divisor
        return -total if self.is_negative else total

    @property
    def timecode(self) -> Timecode:
        """What a counter starting at zero reads after moving by this delta.

        A negative delta wraps around to the top of the range, so -1 frame
        at 24 fps under a 24 hour limit reads 23:59:59:23.

        Returns:
            Timecode: The wrapped reading.
        """
        tc = self.delta
        upper = max_subframes(tc.frame_rate, self.limit, tc.subframes_divisor)
        return tc.__class__.from_subframes(
            tc.frame_rate,
            self.subframes % upper,
            limit=self.limit,
            subframes_divisor=tc.subframes_divisor,
            display_subframes=tc.display_subframes,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Delta):
            return NotImplemented
        return (
            self.delta == other.delta
            and self.sign is other.sign
            and self.limit is other.limit
        )

    def __str__(self) -> str:
        sign = "-" if self.is_negative else ""
        return f"{sign}{self.delta}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.delta!r}, {self.sign})"
