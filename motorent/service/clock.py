"""
Clock
-----

Services ask a clock for the current time instead of reading it
themselves, so that tests can pin "now" to a known moment.
"""

from datetime import datetime, date, time, timezone


class Clock:
    """The wall clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """A clock that is stopped at the given moment."""

    def __init__(self, moment: datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def as_datetime(value: date) -> datetime:
    """
    Converts a date or datetime into an aware datetime.

    Plain dates are taken as midnight UTC, and naive datetimes as UTC.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def as_date(value: date) -> date:
    """Drops the time from a datetime, leaving plain dates alone."""
    return value.date() if isinstance(value, datetime) else value
