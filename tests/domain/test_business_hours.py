"""Tests for Bahrain business hours.

2025-03-13 is a Thursday, 2025-03-14 a Friday, 2025-03-15 a Saturday.
"""

from datetime import datetime, timezone

import pytest

from tendzd.domain import BAHRAIN_TZ, business_hours_status


def _bh(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 3, day, hour, minute, tzinfo=BAHRAIN_TZ)


class TestWeekday:
    """Tests for Sunday-Thursday hours."""

    @pytest.mark.parametrize("hour,minute", [(8, 0), (10, 30), (11, 59), (14, 0), (17, 59)])
    def test_open(self, hour: int, minute: int) -> None:
        """Morning and afternoon windows are open."""
        status = business_hours_status(_bh(13, hour, minute))
        assert status.is_open
        assert status.next_open is None

    def test_before_opening(self) -> None:
        """Early morning reopens at 08:00 the same day."""
        status = business_hours_status(_bh(13, 7))
        assert not status.is_open
        assert status.next_open == _bh(13, 8)

    @pytest.mark.parametrize("hour", [12, 13])
    def test_midday_break(self, hour: int) -> None:
        """The 12:00-14:00 break reopens at 14:00."""
        status = business_hours_status(_bh(13, hour))
        assert not status.is_open
        assert status.next_open == _bh(13, 14)

    def test_thursday_evening_skips_friday(self) -> None:
        """Thursday after 18:00 reopens Saturday morning."""
        status = business_hours_status(_bh(13, 18))
        assert not status.is_open
        assert status.next_open == _bh(15, 8)


class TestWeekend:
    """Tests for Friday and Saturday hours."""

    def test_friday_closed(self) -> None:
        """Friday is closed all day."""
        status = business_hours_status(_bh(14, 10))
        assert not status.is_open
        assert status.next_open == _bh(15, 8)

    def test_saturday_morning_open(self) -> None:
        """Saturday morning is open."""
        assert business_hours_status(_bh(15, 9)).is_open

    def test_saturday_before_opening(self) -> None:
        """Early Saturday reopens at 08:00 the same day."""
        assert business_hours_status(_bh(15, 6)).next_open == _bh(15, 8)

    def test_saturday_afternoon_closed(self) -> None:
        """Saturday afternoon reopens Sunday morning."""
        status = business_hours_status(_bh(15, 15))
        assert not status.is_open
        assert status.next_open == _bh(16, 8)


class TestTimezones:
    """Tests for timezone handling."""

    def test_utc_input_converted(self) -> None:
        """07:00 UTC is 10:00 in Bahrain."""
        assert business_hours_status(datetime(2025, 3, 13, 7, 0, tzinfo=timezone.utc)).is_open

    def test_naive_input_is_utc(self) -> None:
        """Naive input is treated as UTC."""
        assert not business_hours_status(datetime(2025, 3, 13, 4, 0)).is_open

    def test_defaults_to_now(self) -> None:
        """Without an argument the current time is evaluated."""
        status = business_hours_status()
        assert status.is_open or status.next_open is not None
