"""Unit tests for the frame rate catalog and upper limits."""

from fractions import Fraction

import pytest

from tcmath import FrameRate, TimecodeError, UpperLimit


class TestFrameRate:
    """Tests for FrameRate constants."""

    def test_fractional_rate_rounds_up_for_components(self) -> None:
        """Test 23.976 counts 24 frames per second of timecode."""
        rate = FrameRate.FPS_23_976
        assert rate.rate == Fraction(24000, 1001)
        assert rate.fps == 24
        assert rate.max_frame_number == 23
        assert not rate.is_drop

    @pytest.mark.parametrize(
        ("rate", "dropped"),
        [
            (FrameRate.FPS_29_97_DROP, 2),
            (FrameRate.FPS_30_DROP, 2),
            (FrameRate.FPS_59_94_DROP, 4),
            (FrameRate.FPS_60_DROP, 4),
            (FrameRate.FPS_119_88_DROP, 8),
            (FrameRate.FPS_120_DROP, 8),
        ],
    )
    def test_drop_rates(self, rate: FrameRate, dropped: int) -> None:
        """Test drop-frame rates skip frames in proportion to their rate."""
        assert rate.is_drop
        assert rate.frames_dropped_per_minute == dropped

    def test_non_drop_rates_do_not_skip(self) -> None:
        """Test no non-drop rate reports skipped frames."""
        for rate in FrameRate:
            if not str(rate).endswith("d"):
                assert rate.frames_dropped_per_minute == 0

    def test_frame_digits(self) -> None:
        """Test rates of 100 fps and above display three frame digits."""
        assert FrameRate.FPS_60.frame_digits == 2
        assert FrameRate.FPS_100.frame_digits == 3
        assert FrameRate.FPS_119_88_DROP.frame_digits == 3

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("23.976", FrameRate.FPS_23_976),
            ("29.97d", FrameRate.FPS_29_97_DROP),
            ("29.97 drop", FrameRate.FPS_29_97_DROP),
            ("59.94DF", FrameRate.FPS_59_94_DROP),
            (" 25 ", FrameRate.FPS_25),
        ],
    )
    def test_from_string(self, text: str, expected: FrameRate) -> None:
        """Test looking up rates by display string."""
        assert FrameRate.from_string(text) is expected

    def test_from_string_unknown_rate_raises(self) -> None:
        """Test an unsupported rate is rejected."""
        with pytest.raises(TimecodeError):
            FrameRate.from_string("26")


class TestMaxFrames:
    """Tests for the frame counts of each range limit."""

    def test_non_drop_24_hours(self) -> None:
        assert FrameRate.FPS_23_976.max_frames(UpperLimit.TWENTY_FOUR_HOURS) == 2073600

    def test_drop_24_hours(self) -> None:
        """Test 29.97 drop loses 2 frames in 1296 of the 1440 minutes."""
        assert FrameRate.FPS_29_97_DROP.max_frames(UpperLimit.TWENTY_FOUR_HOURS) == 2589408
        assert FrameRate.FPS_59_94_DROP.max_frames(UpperLimit.TWENTY_FOUR_HOURS) == 5178816

    def test_hundred_days(self) -> None:
        assert FrameRate.FPS_25.max_frames(UpperLimit.HUNDRED_DAYS) == 25 * 86400 * 100

    def test_ten_minute_block(self) -> None:
        assert FrameRate.FPS_29_97_DROP.frames_per_ten_minutes == 17982
        assert FrameRate.FPS_25.frames_per_ten_minutes == 15000


class TestUpperLimit:
    """Tests for UpperLimit."""

    def test_wider(self) -> None:
        day = UpperLimit.TWENTY_FOUR_HOURS
        hundred = UpperLimit.HUNDRED_DAYS
        assert day.wider(hundred) is hundred
        assert hundred.wider(day) is hundred
        assert day.wider(day) is day

    def test_max_days(self) -> None:
        assert UpperLimit.TWENTY_FOUR_HOURS.max_days == 1
        assert UpperLimit.HUNDRED_DAYS.max_days == 100
