"""Frame rate catalog and timecode range limits."""

from __future__ import annotations

from enum import Enum
from fractions import Fraction

from .exceptions import TimecodeError

# minutes in a day, and how many of them fall on a ten minute mark
_MINUTES_PER_DAY = 24 * 60
_TEN_MINUTE_MARKS_PER_DAY = _MINUTES_PER_DAY // 10


#%%
class UpperLimit(Enum):
    """The total span a Timecode can cover before it rolls over."""

    TWENTY_FOUR_HOURS = ("24 hours", 1)
    HUNDRED_DAYS = ("100 days", 100)

    def __new__(cls, label: str, max_days: int) -> UpperLimit:
        obj = object.__new__(cls)
        obj._value_ = label
        obj.max_days = max_days
        return obj

    def __str__(self) -> str:
        return self.value

    def wider(self, other: UpperLimit) -> UpperLimit:
        """Return whichever of the two limits spans more days.

        Args:
            other (UpperLimit): The limit to compare with.

        Returns:
            UpperLimit: The wider limit.
        """
        return self if self.max_days >= other.max_days else other
####


#%%
class FrameRate(Enum):
    """Supported timecode frame rates.

    Every member carries its constants as data: the exact rate as a
    Fraction, the whole frames counted per second of timecode, whether it
    uses drop-frame counting and how many frame numbers it skips at each
    minute mark.
    """

    FPS_23_976 = ("23.976", Fraction(24000, 1001), 24, 0)
    FPS_24 = ("24", Fraction(24), 24, 0)
    FPS_24_98 = ("24.98", Fraction(25000, 1001), 25, 0)
    FPS_25 = ("25", Fraction(25), 25, 0)
    FPS_29_97 = ("29.97", Fraction(30000, 1001), 30, 0)
    FPS_29_97_DROP = ("29.97d", Fraction(30000, 1001), 30, 2)
    FPS_30 = ("30", Fraction(30), 30, 0)
    FPS_30_DROP = ("30d", Fraction(30), 30, 2)
    FPS_47_952 = ("47.952", Fraction(48000, 1001), 48, 0)
    FPS_48 = ("48", Fraction(48), 48, 0)
    FPS_50 = ("50", Fraction(50), 50, 0)
    FPS_59_94 = ("59.94", Fraction(60000, 1001), 60, 0)
    FPS_59_94_DROP = ("59.94d", Fraction(60000, 1001), 60, 4)
    FPS_60 = ("60", Fraction(60), 60, 0)
    FPS_60_DROP = ("60d", Fraction(60), 60, 4)
    FPS_100 = ("100", Fraction(100), 100, 0)
    FPS_119_88 = ("119.88", Fraction(120000, 1001), 120, 0)
    FPS_119_88_DROP = ("119.88d", Fraction(120000, 1001), 120, 8)
    FPS_120 = ("120", Fraction(120), 120, 0)
    FPS_120_DROP = ("120d", Fraction(120), 120, 8)

    def __new__(
        cls, label: str, rate: Fraction, fps: int, dropped: int
    ) -> FrameRate:
        obj = object.__new__(cls)
        obj._value_ = label
        obj.rate = rate
        obj.fps = fps
        obj.frames_dropped_per_minute = dropped
        return obj

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, rate: str) -> FrameRate:
        """Look up a frame rate by its display string.

        Args:
            rate (str): One of the display strings, like "23.976" or
                "29.97d". A trailing " drop" or "df" is read as "d".

        Raises:
            TimecodeError: If no supported frame rate matches.

        Returns:
            FrameRate: The matching frame rate.
        """
        key = rate.strip().lower()
        for suffix in (" drop", "drop", " df", "df"):
            if key.endswith(suffix):
                key = key[: -len(suffix)] + "d"
                break
        try:
            return cls(key)
        except ValueError:
            raise TimecodeError(f"Unsupported frame rate: {rate!r}") from None

    @property
    def is_drop(self) -> bool:
        return self.frames_dropped_per_minute > 0

    @property
    def max_frame_number(self) -> int:
        """The highest frame number a timecode can display at this rate."""
        return self.fps - 1

    @property
    def frame_digits(self) -> int:
        """Number of digits used to display the frames component."""
        return 3 if self.fps >= 100 else 2

    @property
    def frames_per_ten_minutes(self) -> int:
        """Counted frames in a ten minute block, after drop-frame skips."""
        return self.fps * 600 - 9 * self.frames_dropped_per_minute

    @property
    def frames_per_day(self) -> int:
        """Counted frames in 24 hours, after drop-frame skips."""
        skipped_minutes = _MINUTES_PER_DAY - _TEN_MINUTE_MARKS_PER_DAY
        return (
            self.fps * 60 * _MINUTES_PER_DAY
            - self.frames_dropped_per_minute * skipped_minutes
        )

    def max_frames(self, limit: UpperLimit) -> int:
        """Return the number of whole frames in the span of the given limit.

        Args:
            limit (UpperLimit): The range limit.

        Returns:
            int: Whole frames in the range; valid frame counts are below it.
        """
        return self.frames_per_day * limit.max_days
####
