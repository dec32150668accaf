"""Unit tests for the Components record."""

import pytest

from tcmath import (
    Component,
    Components,
    FrameRate,
    TimecodeMalformedError,
    UpperLimit,
    decode_string,
)

DAY = UpperLimit.TWENTY_FOUR_HOURS
HUNDRED = UpperLimit.HUNDRED_DAYS


class TestDecodeString:
    """Tests for decoding timecode strings into components."""

    def test_non_drop(self) -> None:
        assert decode_string("01:02:03:04") == Components(hours=1, minutes=2, seconds=3, frames=4)

    def test_drop_separator(self) -> None:
        assert decode_string("00:01:00;02") == Components(minutes=1, frames=2)

    def test_days_and_subframes(self) -> None:
        """Test the full ``D HH:MM:SS:FF.SF`` shape."""
        assert decode_string("2 10:20:30:12.45") == Components(
            days=2, hours=10, minutes=20, seconds=30, frames=12, subframes=45
        )

    def test_out_of_range_values_are_kept(self) -> None:
        """Test decoding does not range check."""
        assert decode_string("99:99:99:99") == Components(
            hours=99, minutes=99, seconds=99, frames=99
        )

    @pytest.mark.parametrize("text", ["", "01:02:03", "aa:bb:cc:dd", "01:02:03:04.", "1:2:3:4:5:6"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(TimecodeMalformedError):
            decode_string(text)

    def test_malformed_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Components.from_string("nope")


class TestValidation:
    """Tests for per-field range checks."""

    def test_valid_components(self) -> None:
        tc = Components(hours=23, minutes=59, seconds=59, frames=23, subframes=99)
        assert tc.invalid_components(FrameRate.FPS_23_976, DAY, 100) == set()

    def test_frames_over_rate(self) -> None:
        tc = Components(frames=24)
        assert tc.invalid_components(FrameRate.FPS_23_976, DAY, 100) == {Component.FRAMES}

    def test_days_depend_on_limit(self) -> None:
        tc = Components(days=1)
        assert tc.invalid_components(FrameRate.FPS_25, DAY, 100) == {Component.DAYS}
        assert tc.invalid_components(FrameRate.FPS_25, HUNDRED, 100) == set()

    def test_subframes_depend_on_divisor(self) -> None:
        tc = Components(subframes=80)
        assert tc.invalid_components(FrameRate.FPS_25, DAY, 80) == {Component.SUBFRAMES}
        assert tc.invalid_components(FrameRate.FPS_25, DAY, 100) == set()

    def test_several_invalid_fields(self) -> None:
        tc = Components(hours=24, minutes=60, seconds=-1)
        assert tc.invalid_components(FrameRate.FPS_25, DAY, 100) == {
            Component.HOURS,
            Component.MINUTES,
            Component.SECONDS,
        }

    def test_drop_frame_skipped_numbers_are_invalid(self) -> None:
        """Test frames 0 and 1 do not exist at 29.97 drop minute marks."""
        rate = FrameRate.FPS_29_97_DROP
        assert Components(minutes=1, frames=0).invalid_components(rate, DAY, 100) == {Component.FRAMES}
        assert Components(minutes=1, frames=1).invalid_components(rate, DAY, 100) == {Component.FRAMES}
        assert Components(minutes=1, frames=2).invalid_components(rate, DAY, 100) == set()
        # tenth minutes and other seconds keep every frame number
        assert Components(minutes=10, frames=0).invalid_components(rate, DAY, 100) == set()
        assert Components(minutes=1, seconds=1, frames=0).invalid_components(rate, DAY, 100) == set()

    def test_valid_range_of_drop_frames(self) -> None:
        tc = Components(minutes=3)
        assert tc.valid_range(Component.FRAMES, FrameRate.FPS_59_94_DROP, DAY, 100) == range(4, 60)


class TestClamped:
    """Tests for clamping each field into range."""

    def test_clamps_every_field(self) -> None:
        tc = Components(days=3, hours=30, minutes=-5, seconds=75, frames=40, subframes=120)
        assert tc.clamped(FrameRate.FPS_24, DAY, 100) == Components(
            hours=23, minutes=0, seconds=59, frames=23, subframes=99
        )

    def test_clamps_drop_frame_minute_mark(self) -> None:
        tc = Components(minutes=1, frames=0)
        assert tc.clamped(FrameRate.FPS_29_97_DROP, DAY, 100) == Components(minutes=1, frames=2)

    def test_clamping_seconds_can_move_the_frames_range(self) -> None:
        tc = Components(minutes=1, seconds=-3, frames=0)
        assert tc.clamped(FrameRate.FPS_29_97_DROP, DAY, 100) == Components(minutes=1, frames=2)

    def test_valid_components_are_unchanged(self) -> None:
        tc = Components(hours=1, frames=5)
        assert tc.clamped(FrameRate.FPS_25, DAY, 100) == tc
