"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import functools
import logging
import math
import sys
from enum import Enum
from fractions import Fraction

from . import codec
from .components import Component, Components, decode_string
from .delta import Delta, Sign
from .exceptions import (
    TimecodeError,
    TimecodeInvalidComponentError,
    TimecodeOutOfRangeError,
    TimecodeRateMismatchError,
)
from .framerate import FrameRate, UpperLimit
from .helpers import Timestamp, _Factor

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class Overflow(Enum):
    """How arithmetic treats results that leave the timecode range.

    CHECKED rejects the operation and keeps the current value, CLAMPING
    saturates at the first or last subframe of the range and WRAPPING takes
    the result modulo the range.
    """

    CHECKED = "checked"
    CLAMPING = "clamping"
    WRAPPING = "wrapping"


#%%
@functools.total_ordering
class Timecode:
    """The main timecode class.

    Does all the calculation over a single absolute count, the number of
    subframe units since 00:00:00:00, and converts it to components using
    the frame rate when required.

    Args:
        frame_rate (FrameRate | str): The frame rate of the Timecode
            instance. A str is looked up with :meth:`FrameRate.from_string`,
            like "23.976" or "29.97d".
        components (Components | str | Timecode | None): The start timecode.
            The components are validated against the frame rate and limit.
            If skipped, ``frames`` defines the timecode, and if that is also
            skipped the timecode is 00:00:00:00.
        limit (UpperLimit): The span of the timecode, 24 hours by default.
        subframes_divisor (int): Number of subframes per frame, 100 by
            default.
        display_subframes (bool): If True, the string representation has a
            ".SF" subframes suffix.
        frames (int): Total number of whole frames to start at.

    Raises:
        TimecodeInvalidComponentError: If a component is out of range.
        TimecodeOutOfRangeError: If ``frames`` is out of range.
    """

    def __init__(
        self,
        frame_rate: FrameRate | str,
        components: Components | str | Timecode | None = None,
        *,
        limit: UpperLimit = UpperLimit.TWENTY_FOUR_HOURS,
        subframes_divisor: int = 100,
        display_subframes: bool = False,
        frames: int | None = None,
    ) -> None:
        if isinstance(frame_rate, str):
            frame_rate = FrameRate.from_string(frame_rate)
        if not isinstance(subframes_divisor, int) or subframes_divisor <= 0:
            raise ValueError(
                f"subframes_divisor should be a positive integer, not "
                f"{subframes_divisor!r}"
            )
        self._frame_rate = frame_rate
        self._limit = limit
        self._subframes_divisor = subframes_divisor
        self.display_subframes = display_subframes

        self._subframes = 0
        self._raw: Components | None = None

        if components is not None:
            self.set_timecode(components)
        elif frames is not None:
            self.frames_total = frames

    @classmethod
    def from_subframes(
        cls,
        frame_rate: FrameRate | str,
        total: int,
        *,
        limit: UpperLimit = UpperLimit.TWENTY_FOUR_HOURS,
        subframes_divisor: int = 100,
        display_subframes: bool = False,
    ) -> Self:
        """Create a Timecode from an absolute count of subframe units.

        Raises:
            TimecodeOutOfRangeError: If the count is outside the range.
        """
        tc = cls(
            frame_rate,
            limit=limit,
            subframes_divisor=subframes_divisor,
            display_subframes=display_subframes,
        )
        if not tc._commit(total, Overflow.CHECKED):
            raise TimecodeOutOfRangeError(
                f"{total} subframes is out of range for {tc.frame_rate} "
                f"with a limit of {tc.limit}."
            )
        return tc

    @classmethod
    def from_raw_values(
        cls,
        frame_rate: FrameRate | str,
        raw_values: Components,
        *,
        limit: UpperLimit = UpperLimit.TWENTY_FOUR_HOURS,
        subframes_divisor: int = 100,
        display_subframes: bool = False,
    ) -> Self:
        """Create a Timecode holding the given components as they are.

        See :meth:`set_timecode` with ``raw_values``.
        """
        tc = cls(
            frame_rate,
            limit=limit,
            subframes_divisor=subframes_divisor,
            display_subframes=display_subframes,
        )
        tc.set_timecode(raw_values=raw_values)
        return tc

    def copy(self) -> Self:
        """Return an independent Timecode with the same settings and value."""
        tc = self.__class__(
            self._frame_rate,
            limit=self._limit,
            subframes_divisor=self._subframes_divisor,
            display_subframes=self.display_subframes,
        )
        tc._subframes = self._subframes
        if self._raw is not None:
            tc._raw = Components(*self._raw.as_tuple())
        return tc

    ####

    @property
    def frame_rate(self) -> FrameRate:
        return self._frame_rate

    @property
    def limit(self) -> UpperLimit:
        return self._limit

    @property
    def subframes_divisor(self) -> int:
        return self._subframes_divisor

    @property
    def max_frames(self) -> int:
        """Return the number of whole frames in the range of this Timecode."""
        return self._frame_rate.max_frames(self._limit)

    @property
    def max_subframes(self) -> int:
        """Return the exclusive upper bound of :attr:`subframes_total`."""
        return codec.max_subframes(
            self._frame_rate, self._limit, self._subframes_divisor
        )

    @property
    def subframes_total(self) -> int:
        """Return the absolute position as a count of subframe units.

        Returns:
            int: The count. For raw values this is the count the raw
                components encode to, and it may be out of range.
        """
        if self._raw is not None:
            return codec.encode(
                self._raw, self._frame_rate, self._subframes_divisor
            )
        return self._subframes

    @property
    def frames_total(self) -> int:
        """Return the absolute position in whole frames.

        Returns:
            int: The number of whole frames since 00:00:00:00.
        """
        return self.subframes_total // self._subframes_divisor

    @frames_total.setter
    def frames_total(self, frames: int) -> None:
        """Set the absolute position in whole frames.

        Args:
            frames (int): A positive int, smaller than :attr:`max_frames`.
        """
        if not isinstance(frames, int) or isinstance(frames, bool):
            raise TypeError(
                f"{self.__class__.__name__}.frames_total should be an integer, "
                f"not a {frames.__class__.__name__}"
            )
        if not self._commit(frames * self._subframes_divisor, Overflow.CHECKED):
            raise TimecodeOutOfRangeError(
                f"{self.__class__.__name__}.frames_total should be in "
                f"[0, {self.max_frames}), not {frames}"
            )

    @property
    def exact_frames(self) -> Fraction:
        """Return the absolute position in frames, subframes included."""
        return Fraction(self.subframes_total, self._subframes_divisor)

    @property
    def components(self) -> Components:
        """Return the timecode components.

        Returns:
            Components: The raw values if they were set with
                :meth:`set_timecode`, the decoded count otherwise.
        """
        if self._raw is not None:
            return Components(*self._raw.as_tuple())
        return codec.decode(
            self._subframes, self._frame_rate, self._limit,
            self._subframes_divisor,
        )

    @property
    def days(self) -> int:
        return self.components.days

    @property
    def hours(self) -> int:
        return self.components.hours

    @property
    def minutes(self) -> int:
        return self.components.minutes

    @property
    def seconds(self) -> int:
        return self.components.seconds

    @property
    def frames(self) -> int:
        """Return the frames part of the timecode."""
        return self.components.frames

    @property
    def subframes(self) -> int:
        return self.components.subframes

    @property
    def invalid_components(self) -> set[Component]:
        """Return the components that are out of range.

        Only raw values can be invalid, values set by any other means are
        always in range.

        Returns:
            set: The invalid :class:`Component` fields.
        """
        return self.components.invalid_components(
            self._frame_rate, self._limit, self._subframes_divisor
        )

    @property
    def is_valid(self) -> bool:
        return not self.invalid_components

    ####

    def _to_components(self, timecode: Components | str | Timecode) -> Components:
        if isinstance(timecode, Components):
            return timecode
        if isinstance(timecode, str):
            return decode_string(timecode)
        if isinstance(timecode, Timecode):
            self._check_rate(timecode)
            return timecode.components
        raise TimecodeError(
            f"Type {timecode.__class__.__name__} can not be used as timecode "
            "components."
        )

    def _check_rate(self, other: Timecode) -> None:
        if other.frame_rate is not self._frame_rate:
            raise TimecodeRateMismatchError(
                f"Can not combine a {other.frame_rate} timecode with a "
                f"{self._frame_rate} timecode."
            )

    def set_timecode(
        self,
        timecode: Components | str | Timecode | None = None,
        *,
        raw_values: Components | None = None,
        overflow: Overflow | str = Overflow.CHECKED,
    ) -> None:
        """Set the timecode from components.

        Args:
            timecode (Components | str | Timecode): The new value. How out of
                range components are treated depends on ``overflow``:
                CHECKED raises, CLAMPING clamps every component into its
                range and WRAPPING wraps the total count around the range.
            raw_values (Components): Store these components verbatim,
                without validating them. Meant for previewing partially
                entered values. The components are kept until the next
                successful change of the value.
            overflow (Overflow | str): The overflow policy.

        Raises:
            TimecodeInvalidComponentError: If a component is out of range
                under the CHECKED policy.
        """
        if raw_values is not None:
            logger.debug("Storing raw timecode values %s", raw_values)
            self._raw = Components(*raw_values.as_tuple())
            return

        if timecode is None:
            raise TypeError("set_timecode() needs timecode or raw_values")

        overflow = Overflow(overflow)
        components = self._to_components(timecode)

        if overflow is Overflow.CHECKED:
            invalid = components.invalid_components(
                self._frame_rate, self._limit, self._subframes_divisor
            )
            if invalid:
                names = ", ".join(sorted(c.value for c in invalid))
                raise TimecodeInvalidComponentError(
                    f"Invalid {names} in {components} at {self._frame_rate} "
                    f"with a limit of {self._limit}.",
                    invalid,
                )
        elif overflow is Overflow.CLAMPING:
            components = components.clamped(
                self._frame_rate, self._limit, self._subframes_divisor
            )

        total = codec.encode(components, self._frame_rate, self._subframes_divisor)
        self._commit(total, overflow)

    def _commit(self, total: int, overflow: Overflow) -> bool:
        """Store a new count, applying the overflow policy.

        Args:
            total (int): The new count of subframe units.
            overflow (Overflow): The overflow policy.

        Returns:
            bool: False if the CHECKED policy rejected the count, in which
                case nothing changed.
        """
        upper = self.max_subframes
        if overflow is Overflow.WRAPPING:
            total %= upper
        elif overflow is Overflow.CLAMPING:
            total = min(max(total, 0), upper - 1)
        elif not 0 <= total < upper:
            logger.debug(
                "Rejected %s subframes, out of range [0, %s)", total, upper
            )
            return False

        self._subframes = total
        self._raw = None
        return True

    def _operand_subframes(self, other: Components | Timecode | str | int) -> int:
        """Convert an add/subtract operand to a count of subframe units."""
        if isinstance(other, Timecode):
            self._check_rate(other)
            if other.subframes_divisor == self._subframes_divisor:
                return other.subframes_total
            return round(other.exact_frames * self._subframes_divisor)
        if isinstance(other, (Components, str)):
            return codec.encode(
                self._to_components(other), self._frame_rate,
                self._subframes_divisor,
            )
        if isinstance(other, int) and not isinstance(other, bool):
            return other * self._subframes_divisor
        raise TimecodeError(
            f"Type {other.__class__.__name__} not supported for arithmetic."
        )

    def _scaled(self, factor: _Factor, divide: bool = False) -> int | None:
        """Scale the count by a factor, rounded to the nearest subframe."""
        if isinstance(factor, float) and not math.isfinite(factor):
            return None
        if not isinstance(factor, (int, float, Fraction)):
            raise TimecodeError(
                f"Type {factor.__class__.__name__} not supported for arithmetic."
            )
        factor = Fraction(factor)
        if divide:
            if factor == 0:
                raise ZeroDivisionError("Can not divide a Timecode by zero.")
            factor = 1 / factor
        return round(self.subframes_total * factor)

    def _apply(self, total: int | None, overflow: Overflow | str) -> bool:
        overflow = Overflow(overflow)
        if total is None:
            if overflow is not Overflow.CHECKED:
                raise TimecodeError("Can not scale a Timecode by a non-finite factor.")
            logger.debug("Rejected scaling by a non-finite factor")
            return False
        return self._commit(total, overflow)

    def add(
        self,
        other: Components | Timecode | str | int,
        overflow: Overflow | str = Overflow.CHECKED,
    ) -> bool:
        """Add a duration to this Timecode.

        Args:
            other (Components | Timecode | str | int): The duration. Components
                and strings are not validated, so ``Components(frames=48)``
                is two seconds at 24 fps. An int is a number of frames. A
                Timecode should have the same frame rate.
            overflow (Overflow | str): The overflow policy.

        Raises:
            TimecodeRateMismatchError: If other is a Timecode with a different
                frame rate.

        Returns:
            bool: False if the CHECKED policy rejected the result, in which
                case this Timecode is unchanged. Always True otherwise.
        """
        total = self.subframes_total + self._operand_subframes(other)
        return self._apply(total, overflow)

    def subtract(
        self,
        other: Components | Timecode | str | int,
        overflow: Overflow | str = Overflow.CHECKED,
    ) -> bool:
        """Subtract a duration from this Timecode.

        See :meth:`add` for the arguments and the return value.
        """
        total = self.subframes_total - self._operand_subframes(other)
        return self._apply(total, overflow)

    def multiply(
        self, factor: _Factor, overflow: Overflow | str = Overflow.CHECKED
    ) -> bool:
        """Multiply the absolute position of this Timecode.

        CLAMPING saturates to the last subframe of the range, the same
        ceiling as :meth:`add`.

        Args:
            factor (int | float | Fraction): The multiplier. The result is
                rounded to the nearest subframe.
            overflow (Overflow | str): The overflow policy.

        Returns:
            bool: False if the CHECKED policy rejected the result.
        """
        return self._apply(self._scaled(factor), overflow)

    def divide(
        self, factor: _Factor, overflow: Overflow | str = Overflow.CHECKED
    ) -> bool:
        """Divide the absolute position of this Timecode.

        A negative divisor gives a negative result, which only the WRAPPING
        policy maps back into the range: 01:00:00:00 divided by -2 wraps to
        23:30:00:00 under a 24 hour limit.

        Args:
            factor (int | float | Fraction): The divisor.
            overflow (Overflow | str): The overflow policy.

        Raises:
            ZeroDivisionError: If factor is zero.

        Returns:
            bool: False if the CHECKED policy rejected the result.
        """
        return self._apply(self._scaled(factor, divide=True), overflow)

    def offset(self, delta: Delta, overflow: Overflow | str = Overflow.WRAPPING) -> bool:
        """Move this Timecode by a signed delta.

        Args:
            delta (Delta): The delta, its magnitude is added or subtracted
                depending on its sign.
            overflow (Overflow | str): The overflow policy, wrapping by
                default.

        Returns:
            bool: False if the CHECKED policy rejected the result.
        """
        if delta.is_negative:
            return self.subtract(delta.delta, overflow)
        return self.add(delta.delta, overflow)

    def _derived(self, method: str, operand: object, overflow: Overflow | str) -> Self:
        tc = self.copy()
        if not getattr(tc, method)(operand, overflow):
            raise TimecodeOutOfRangeError(
                f"{method} {operand} leaves the range of {self!r}."
            )
        return tc

    def adding(
        self,
        other: Components | Timecode | str | int,
        overflow: Overflow | str = Overflow.CHECKED,
    ) -> Self:
        """Return a new Timecode with the duration added to this one.

        Raises:
            TimecodeOutOfRangeError: If the CHECKED policy rejected the
                result.
        """
        return self._derived("add", other, overflow)

    def subtracting(
        self,
        other: Components | Timecode | str | int,
        overflow: Overflow | str = Overflow.CHECKED,
    ) -> Self:
        return self._derived("subtract", other, overflow)

    def multiplying(
        self, factor: _Factor, overflow: Overflow | str = Overflow.CHECKED
    ) -> Self:
        return self._derived("multiply", factor, overflow)

    def dividing(
        self, factor: _Factor, overflow: Overflow | str = Overflow.CHECKED
    ) -> Self:
        return self._derived("divide", factor, overflow)

    def offsetting(
        self, delta: Delta, overflow: Overflow | str = Overflow.WRAPPING
    ) -> Self:
        """Return a new Timecode moved by the delta, see :meth:`offset`."""
        return self._derived("offset", delta, overflow)

    def delta(self, to: Timecode) -> Delta:
        """Return the signed distance from this Timecode to another one.

        The magnitude is expressed under the wider of the two limits, so a
        distance of more than a day is representable when either side uses
        the 100 days limit. :attr:`Delta.timecode` wraps under the limit of
        this Timecode.

        Args:
            to (Timecode): The other Timecode, with the same frame rate.

        Raises:
            TimecodeRateMismatchError: If the frame rates differ.
            TimecodeInvalidComponentError: If either side holds raw values
                with out of range components.

        Returns:
            Delta: The distance.
        """
        self._check_rate(to)
        for tc in (self, to):
            invalid = tc.invalid_components
            if invalid:
                names = ", ".join(sorted(c.value for c in invalid))
                raise TimecodeInvalidComponentError(
                    f"Can not measure a delta from {tc}, invalid {names}.",
                    invalid,
                )
        difference = self._operand_subframes(to) - self.subframes_total
        magnitude = self.__class__.from_subframes(
            self._frame_rate,
            abs(difference),
            limit=self._limit.wider(to.limit),
            subframes_divisor=self._subframes_divisor,
            display_subframes=self.display_subframes,
        )
        sign = Sign.NEGATIVE if difference < 0 else Sign.POSITIVE
        return Delta(magnitude, sign, limit=self._limit)

    def next(self) -> Self:
        """Add one frame to this Timecode, wrapping at the end of the range.

        Returns:
            Timecode: Returns self.
        """
        self.add(1, Overflow.WRAPPING)
        return self

    def back(self) -> Self:
        """Subtract one frame from this Timecode, wrapping at zero.

        Returns:
            Timecode: Returns self.
        """
        self.subtract(1, Overflow.WRAPPING)
        return self

    ####

    def to_realtime(self, usec_precision: bool = False) -> Timestamp:
        """Convert the Timecode to the wall-clock (real time) timestamp.

        For fractional rates the real time differs from the time the
        components read, 01:00:00;00 at 29.97 drop is 3599.9964 seconds.

        Returns:
            Timestamp: The real time of the Timecode.
        """
        ts = self.exact_frames / self._frame_rate.rate
        return Timestamp(ts, usec_precision=usec_precision)

    def _render(self, subframes: bool) -> str:
        c = self.components
        days = f"{c.days} " if c.days != 0 else ""
        frame_delimiter = ";" if self._frame_rate.is_drop else ":"
        digits = self._frame_rate.frame_digits
        tc = (
            f"{days}{c.hours:02d}:{c.minutes:02d}:{c.seconds:02d}"
            f"{frame_delimiter}{c.frames:0{digits}d}"
        )
        if subframes:
            sf_digits = len(str(self._subframes_divisor - 1))
            tc += f".{c.subframes:0{sf_digits}d}"
        return tc

    @property
    def string_value(self) -> str:
        """Return the timecode string.

        Returns:
            str: Like "01:00:00:00", with ";" before the frames for drop
                frame rates, the days in front when not zero and a ".SF"
                subframes suffix if :attr:`display_subframes` is set.
        """
        return self._render(self.display_subframes)

    def __str__(self) -> str:
        return self.string_value

    def __repr__(self) -> str:
        limit = ""
        if self._limit is not UpperLimit.TWENTY_FOUR_HOURS:
            limit = f", limit=UpperLimit.{self._limit.name}"
        return (
            f"{self.__class__.__name__}('{self._frame_rate}', "
            f"'{self._render(subframes=True)}'{limit})"
        )

    def __float__(self) -> float:
        return float(self.to_realtime())

    def __eq__(self, other: object) -> bool:
        """Override the equality operator.

        Args:
            other (Timecode | Components | str | int): A Timecode is equal if
                it has the same frame rate, limit and position. Components
                and strings are compared with the components of this one,
                an int with the number of whole frames.

        Returns:
            bool: True if the other is equal to this Timecode instance.
        """
        if isinstance(other, Timecode):
            return (
                self._frame_rate is other._frame_rate
                and self._limit is other._limit
                and self.exact_frames == other.exact_frames
            )
        if isinstance(other, str):
            return self.components == decode_string(other)
        if isinstance(other, Components):
            return self.components == other
        if isinstance(other, int) and not isinstance(other, bool):
            return self.frames_total == other
        return False

    def __lt__(self, other: Timecode | int) -> bool:
        if isinstance(other, Timecode):
            self._check_rate(other)
            return self.exact_frames < other.exact_frames
        if isinstance(other, int):
            return self.frames_total < other
        raise TypeError(
            "'<' not supported between instances of 'Timecode' and "
            f"'{other.__class__.__name__}'"
        )

    def __add__(self, other: Components | Timecode | str | int) -> Self:
        return self.adding(other)

    def __sub__(self, other: Components | Timecode | str | int) -> Self:
        return self.subtracting(other)

    def __mul__(self, other: _Factor) -> Self:
        return self.multiplying(other)

    def __truediv__(self, other: _Factor) -> Self:
        return self.dividing(other)
####


#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    Keyword arguments of :class:`Timecode` given to the builder are used
    every time the builder is called to create a new Timecode.

    Args:
        kwargs (dict): Pre-configured arguments, like ``frame_rate``,
            ``limit``, ``subframes_divisor`` or ``display_subframes``.
    """

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def __call__(self, *args, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and call arguments.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        return Timecode(*args, **kwargs)

    def raw(self, raw_values: Components | str) -> Timecode:
        """Create a Timecode holding unvalidated components, for previews.

        Args:
            raw_values (Components | str): The components, a str is decoded
                first.

        Returns:
            Timecode: The Timecode holding the raw values.
        """
        if isinstance(raw_values, str):
            raw_values = decode_string(raw_values)
        return Timecode.from_raw_values(raw_values=raw_values, **self.kwargs)
####
