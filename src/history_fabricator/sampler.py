#!/usr/bin/env python3
"""
Random timestamp sampling over an inclusive calendar date range.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from history_fabricator.constants import MAX_HOUR, MAX_MINUTE, MAX_SECOND


def parse_date(value: str | date) -> date:
    """Return a calendar date from a ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days; ``end`` covers the whole day.

    A range whose start lies after its end is not rejected: it collapses to
    the start day.
    """

    start: date
    end: date

    @classmethod
    def from_values(cls, start: str | date, end: str | date) -> DateRange:
        return cls(parse_date(start), parse_date(end))

    @property
    def total_days(self) -> int:
        return max(0, (self.end - self.start).days)


def random_timestamp_between(
    start: str | date,
    end: str | date,
    rng: random.Random | None = None,
    tz: tzinfo = timezone.utc,
) -> datetime:
    """Return one timestamp uniform over [start 00:00:00, end 23:59:59]."""
    span = DateRange.from_values(start, end)
    randint = (rng or random).randint

    day = randint(0, span.total_days)
    hour = randint(0, MAX_HOUR)
    minute = randint(0, MAX_MINUTE)
    second = randint(0, MAX_SECOND)

    midnight = datetime.combine(span.start, time(0, 0, 0), tzinfo=tz)
    return midnight + timedelta(days=day, hours=hour, minutes=minute, seconds=second)


def sample_timestamps(
    start: str | date,
    end: str | date,
    count: int,
    rng: random.Random | None = None,
    tz: tzinfo = timezone.utc,
) -> list[datetime]:
    """Draw ``count`` independent timestamps from the range.

    The result is in sampling order; callers sort it when they need
    chronological output.
    """
    if count <= 0:
        return []
    return [random_timestamp_between(start, end, rng=rng, tz=tz) for _ in range(count)]


def format_timestamp(ts: datetime) -> str:
    """Absolute-time string used for payloads, commit messages and git dates."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.isoformat(timespec="seconds")
