"""Time helpers anchored to Bahrain local time.

Bahrain is UTC+3 all year round (no daylight saving), so a fixed offset
is exact. Naive datetimes are treated as UTC.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone


BAHRAIN_TZ = timezone(timedelta(hours=3), "Asia/Bahrain")
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def read_clock(clock: Clock | None = None) -> datetime:
    """Read a clock, defaulting to ``utc_now``, as an aware datetime."""
    moment = (clock or utc_now)()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def to_bahrain_time(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(BAHRAIN_TZ)


def epoch_millis(moment: datetime) -> int:
    """Whole milliseconds since the Unix epoch."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - UNIX_EPOCH) // timedelta(milliseconds=1)
