"""Conversion between timecode components and absolute frame counts.

Counts are integers in subframe units, ``frames * subframes_divisor +
subframes``, so every supported rate is handled with exact integer math.

Drop-frame rates skip the first ``frames_dropped_per_minute`` frame numbers
of every minute except the minutes divisible by ten, so 29.97 drop goes from
00:00:59;29 to 00:01:00;02 but from 00:09:59;29 to 00:10:00;00.
"""

from __future__ import annotations

from .components import Components
from .exceptions import TimecodeOutOfRangeError
from .framerate import FrameRate, UpperLimit


def _div_toward_zero(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


def max_subframes(
    frame_rate: FrameRate, limit: UpperLimit, subframes_divisor: int
) -> int:
    """Return the exclusive upper bound of counts for the given settings.

    Args:
        frame_rate (FrameRate): The frame rate.
        limit (UpperLimit): The range limit.
        subframes_divisor (int): Subframes per frame.

    Returns:
        int: The count of subframe units in the whole range.
    """
    return frame_rate.max_frames(limit) * subframes_divisor


def encode(
    components: Components, frame_rate: FrameRate, subframes_divisor: int
) -> int:
    """Convert components to an absolute count of subframe units.

    Any components are accepted, including out of range and negative values,
    so a record can be used as a duration. Negative minutes drop the same
    number of frames as the positive ones, only with the opposite sign.

    Args:
        components (Components): The components to convert.
        frame_rate (FrameRate): The frame rate.
        subframes_divisor (int): Subframes per frame.

    Returns:
        int: The number of subframe units.
    """
    fps = frame_rate.fps
    drop_frames = frame_rate.frames_dropped_per_minute

    total_minutes = (
        (24 * 60 * components.days) + (60 * components.hours) + components.minutes
    )

    frame_number = (
        (fps * 60 * total_minutes)
        + (fps * components.seconds)
        + components.frames
    ) - (drop_frames * (total_minutes - _div_toward_zero(total_minutes, 10)))

    return frame_number * subframes_divisor + components.subframes


def decode(
    total: int,
    frame_rate: FrameRate,
    limit: UpperLimit,
    subframes_divisor: int,
) -> Components:
    """Convert an absolute count of subframe units back to components.

    Args:
        total (int): The count, in ``[0, max_subframes)``.
        frame_rate (FrameRate): The frame rate.
        limit (UpperLimit): The range limit.
        subframes_divisor (int): Subframes per frame.

    Raises:
        TimecodeOutOfRangeError: If the count is outside the range.

    Returns:
        Components: The decoded components.
    """
    upper = max_subframes(frame_rate, limit, subframes_divisor)
    if not 0 <= total < upper:
        raise TimecodeOutOfRangeError(
            f"Can not decode {total} subframes, valid counts are [0, {upper}) "
            f"at {frame_rate} with a limit of {limit}."
        )

    frame_number, subframes = divmod(total, subframes_divisor)

    fps = frame_rate.fps
    if frame_rate.is_drop:
        drop_frames = frame_rate.frames_dropped_per_minute
        frames_per_minute = fps * 60 - drop_frames
        d, m = divmod(frame_number, frame_rate.frames_per_ten_minutes)
        # put back the frame numbers skipped so far
        frame_number += drop_frames * 9 * d
        if m > drop_frames:
            frame_number += drop_frames * ((m - drop_frames) // frames_per_minute)

    total_seconds, frames = divmod(frame_number, fps)

    return Components(
        days=total_seconds // 86400,
        hours=(total_seconds // 3600) % 24,
        minutes=(total_seconds // 60) % 60,
        seconds=total_seconds % 60,
        frames=frames,
        subframes=subframes,
    )
