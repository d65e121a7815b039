"""Bahrain business hours.

Weekly schedule in Bahrain local time:

    Sunday-Thursday   08:00-12:00, 14:00-18:00
    Friday            closed
    Saturday          08:00-12:00
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from tendzd.domain.base import ValueObject
from tendzd.domain.clock import BAHRAIN_TZ, to_bahrain_time, utc_now


_MORNING = (time(8), time(12))
_AFTERNOON = (time(14), time(18))

# Keyed by datetime.weekday(): Monday == 0
WEEKLY_SCHEDULE: dict[int, tuple[tuple[time, time], ...]] = {
    0: (_MORNING, _AFTERNOON),
    1: (_MORNING, _AFTERNOON),
    2: (_MORNING, _AFTERNOON),
    3: (_MORNING, _AFTERNOON),
    4: (),
    5: (_MORNING,),
    6: (_MORNING, _AFTERNOON),
}


@dataclass(frozen=True)
class BusinessHoursStatus(ValueObject):
    """Whether businesses are open at a given moment.

    Attributes:
        is_open: True inside an opening window.
        next_open: Start of the next opening window when closed, else None.
    """

    is_open: bool
    next_open: datetime | None = None


def opening_windows(day: date) -> tuple[tuple[time, time], ...]:
    """Opening windows for a calendar day, as (start, end) local times."""
    return WEEKLY_SCHEDULE[day.weekday()]


def business_hours_status(at: datetime | None = None) -> BusinessHoursStatus:
    """Evaluate business hours at a moment.

    Args:
        at: Moment to evaluate; defaults to now. Naive values are UTC.

    Returns:
        BusinessHoursStatus; ``next_open`` is an aware Bahrain-local datetime.
    """
    local = to_bahrain_time(at or utc_now())
    now = local.time()

    for start, end in opening_windows(local.date()):
        if start <= now < end:
            return BusinessHoursStatus(is_open=True)

    # Every week has an opening window, so a week of lookahead always finds one
    for offset in range(8):
        day = local.date() + timedelta(days=offset)
        for start, _ in opening_windows(day):
            candidate = datetime.combine(day, start, tzinfo=BAHRAIN_TZ)
            if candidate > local:
                return BusinessHoursStatus(is_open=False, next_open=candidate)

    raise RuntimeError("Weekly schedule has no opening windows")
