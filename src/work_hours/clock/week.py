"""Week bucketing and weekly hour totals over a flat clock log.

Weeks run Monday 00:00:00 to Sunday 23:59:59 in a single reference zone.
Buckets are derived on every read; nothing here keeps state between calls.

Known limitation: clock-in/clock-out pairing is positional inside a bucket.
A shift that starts on Sunday and ends on Monday splits across two buckets,
so the later bucket begins with a clock-out and every pair after it is
matched against the wrong partner. Totals are reported as computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import get_zone, to_zone
from ..core.constants import DAYS_PER_WEEK, HOURS_QUANTUM
from .model import ClockEvent

_MICROS_PER_HOUR = Decimal(3600 * 1_000_000)


@dataclass(frozen=True, order=True)
class WeekKey:
    """Monday..Sunday span identifying a week bucket."""

    start: date
    end: date

    @classmethod
    def starting(cls, monday: date) -> "WeekKey":
        return cls(start=monday, end=monday + timedelta(days=DAYS_PER_WEEK - 1))

    @property
    def label(self) -> str:
        return f"{self.start:%a %b %d %Y}-{self.end:%a %b %d %Y}"

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class WeekSummary:
    """Read-model for one week: its events in log order and their total."""

    key: WeekKey
    events: tuple[ClockEvent, ...]
    total_hours: Decimal


def assign_week(timestamp: datetime, zone: Optional[tzinfo] = None) -> WeekKey:
    local_day = to_zone(timestamp, zone or get_zone()).date()
    # weekday(): Monday=0 .. Sunday=6, so Sunday closes the week.
    return WeekKey.starting(local_day - timedelta(days=local_day.weekday()))


def group_by_week(
    events: Iterable[ClockEvent], zone: Optional[tzinfo] = None
) -> dict[WeekKey, list[ClockEvent]]:
    zone = zone or get_zone()
    buckets: dict[WeekKey, list[ClockEvent]] = {}
    for event in events:
        if event is None or event.timestamp is None:
            continue
        buckets.setdefault(assign_week(event.timestamp, zone), []).append(event)
    return buckets


def total_duration(events: Sequence[ClockEvent], zone: Optional[tzinfo] = None) -> Decimal:
    """Sum of (events[2i+1] - events[2i]) in hours, two decimals.

    A trailing unpaired event adds nothing. Negative spans are kept.
    """
    micros = 0
    for i in range(0, len(events) - 1, 2):
        clock_in, clock_out = events[i].timestamp, events[i + 1].timestamp
        if clock_in is None or clock_out is None:
            continue
        micros += _span_micros(clock_in, clock_out, zone or get_zone())
    hours = Decimal(micros) / _MICROS_PER_HOUR
    return hours.quantize(Decimal(HOURS_QUANTUM), rounding=ROUND_HALF_UP)


def delete_week(
    events: Iterable[ClockEvent], key: WeekKey, zone: Optional[tzinfo] = None
) -> list[ClockEvent]:
    zone = zone or get_zone()
    return [
        e for e in events
        if e.timestamp is None or assign_week(e.timestamp, zone) != key
    ]


def _span_micros(start: datetime, end: datetime, zone: tzinfo) -> int:
    # Same-tzinfo subtraction is wall-clock; compare instants across DST.
    start = to_zone(start, zone).astimezone(timezone.utc)
    end = to_zone(end, zone).astimezone(timezone.utc)
    return (end - start) // timedelta(microseconds=1)


class WeekAggregator:
    """Bucketing bound to one reference zone."""

    def __init__(self, zone: Optional[tzinfo] = None):
        self._zone = zone or get_zone()

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def assign_week(self, timestamp: datetime) -> WeekKey:
        return assign_week(timestamp, self._zone)

    def group_by_week(self, events: Iterable[ClockEvent]) -> dict[WeekKey, list[ClockEvent]]:
        return group_by_week(events, self._zone)

    def total_duration(self, events: Sequence[ClockEvent]) -> Decimal:
        return total_duration(events, self._zone)

    def delete_week(self, events: Iterable[ClockEvent], key: WeekKey) -> list[ClockEvent]:
        return delete_week(events, key, self._zone)

    def summarize(self, events: Iterable[ClockEvent]) -> list[WeekSummary]:
        return [
            WeekSummary(key=key, events=tuple(bucket), total_hours=total_duration(bucket, self._zone))
            for key, bucket in self.group_by_week(events).items()
        ]
