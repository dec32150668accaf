"""Helper types for Timecode handling and byproducts."""

from __future__ import annotations

import functools
import sys
from fractions import Fraction
from typing import NewType

if sys.version_info >= (3, 11):
    _factor_type = int | float | Fraction
else:
    from typing import Union
    _factor_type = Union[int, float, Fraction]

_Factor = NewType("_Factor", _factor_type)


@functools.total_ordering
class Timestamp:
    """A wall-clock position in seconds, kept as an exact fraction.

    Args:
        ts (Fraction): The time in seconds, can not be negative.
        usec_precision (bool): Render microseconds instead of milliseconds.
    """

    def __init__(self, ts: Fraction, usec_precision: bool = False) -> None:
        if ts < 0:
            raise ValueError(f"Timestamp cannot be negative, got {ts}.")
        self.usec_precision = usec_precision
        self._exact_ts = Fraction(ts)

    def __float__(self) -> float:
        return float(self._exact_ts)

    def total_seconds(self) -> float:
        """Return the time in seconds as a float, truncation is possible."""
        return float(self)

    def exact(self) -> Fraction:
        """Return the time in seconds as an exact fraction."""
        return self._exact_ts

    def _coerce(self, other: object) -> Fraction | float | None:
        if isinstance(other, Timestamp):
            return other._exact_ts
        if isinstance(other, (int, Fraction)):
            return Fraction(other)
        if isinstance(other, float):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        if isinstance(value, float):
            return float(self) == value
        return self._exact_ts == value

    def __lt__(self, other: object) -> bool:
        value = self._coerce(other)
        if value is None:
            return NotImplemented
        if isinstance(value, float):
            return float(self) < value
        return self._exact_ts < value

    def __hash__(self) -> int:
        return hash(self._exact_ts)

    def __str__(self) -> str:
        """Render as ``HH:MM:SS.mmm``, or ``HH:MM:SS.uuuuuu`` with usec."""
        hh = int(self._exact_ts // 3600)
        mm = int(self._exact_ts // 60) % 60
        ss = int(self._exact_ts % 60)
        decimal_part = (self._exact_ts - int(self._exact_ts)) * 1000

        if self.usec_precision:
            s_decimal_part = f"{round(decimal_part * 1000):06}"
        else:
            s_decimal_part = f"{round(decimal_part):03}"
        return f"{hh:02d}:{mm:02d}:{ss:02d}.{s_decimal_part}"

    def __repr__(self) -> str:
        usec_part = f", usec_precision={self.usec_precision}" * self.usec_precision
        return f"{self.__class__.__name__}({self._exact_ts!s}{usec_part})"
