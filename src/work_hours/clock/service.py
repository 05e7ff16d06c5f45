from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Callable, Optional

from ..common.datetime_utils import now_local, to_zone
from ..common.validators import require_after, require_non_empty
from ..core.enums import ClockEventType
from ..core.exceptions import NotFoundError
from .model import ClockEvent
from .repository import ClockEventRepository
from .week import WeekAggregator, WeekKey, WeekSummary

logger = logging.getLogger(__name__)

LOCATION_REQUIRED = "Please enter a location."
CLOCK_OUT_BEFORE_IN = "Clock-out time must be after clock-in time."

DISPLAY_FORMAT = "%A, %B %d, %Y, %I:%M %p"


class ClockService:
    """User-facing operations over the clock log.

    Every mutation loads the whole log, transforms it and saves it back.
    """

    def __init__(
        self,
        events: ClockEventRepository,
        *,
        aggregator: Optional[WeekAggregator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._events = events
        self._aggregator = aggregator or WeekAggregator()
        self._clock = clock or (lambda: now_local(self._aggregator.zone))

    @property
    def aggregator(self) -> WeekAggregator:
        return self._aggregator

    def list_events(self) -> list[ClockEvent]:
        return self._events.load()

    def next_action(self, events: Optional[list[ClockEvent]] = None) -> ClockEventType:
        if events is None:
            events = self._events.load()
        return ClockEventType.CLOCK_IN if len(events) % 2 == 0 else ClockEventType.CLOCK_OUT

    def clock_in_out(self, location: Optional[str] = None, *, now: Optional[datetime] = None) -> ClockEvent:
        events = self._events.load()
        kind = self.next_action(events)

        if kind == ClockEventType.CLOCK_IN:
            location = require_non_empty(location, LOCATION_REQUIRED)
        else:
            location = events[-1].location

        event = ClockEvent(kind=kind, timestamp=self._localize(now or self._clock()), location=location)
        self._events.save([*events, event])
        logger.info("%s recorded at %s", kind.value, event.timestamp.isoformat())
        return event

    def add_custom_pair(
        self, location: Optional[str], clock_in: datetime, clock_out: datetime
    ) -> tuple[ClockEvent, ClockEvent]:
        location = require_non_empty(location, LOCATION_REQUIRED)
        clock_in, clock_out = self._localize(clock_in), self._localize(clock_out)
        require_after(clock_out, clock_in, CLOCK_OUT_BEFORE_IN)

        pair = (
            ClockEvent(kind=ClockEventType.CLOCK_IN, timestamp=clock_in, location=location),
            ClockEvent(kind=ClockEventType.CLOCK_OUT, timestamp=clock_out, location=location),
        )
        self._events.save([*self._events.load(), *pair])
        logger.info("Custom hours added: %s -> %s", clock_in.isoformat(), clock_out.isoformat())
        return pair

    def delete_event(self, event_id: str) -> ClockEvent:
        events = self._events.load()
        for index, event in enumerate(events):
            if event.event_id == event_id:
                self._events.save(events[:index] + events[index + 1:])
                logger.info("Deleted clock event %s", event_id)
                return event
        raise NotFoundError(f"Clock event {event_id} not found")

    def delete_week(self, week: date | WeekKey) -> int:
        key = week if isinstance(week, WeekKey) else self._aggregator.assign_week(datetime.combine(week, time.min))
        events = self._events.load()
        remaining = self._aggregator.delete_week(events, key)
        removed = len(events) - len(remaining)
        if removed:
            self._events.save(remaining)
        logger.info("Deleted %d clock events for week %s", removed, key.label)
        return removed

    def weekly_summary(self) -> list[WeekSummary]:
        return self._aggregator.summarize(self._events.load())

    def history_ui(self) -> list[dict]:
        return [self._week_to_ui(s) for s in self.weekly_summary()]

    def format_time(self, timestamp: datetime) -> str:
        return self._localize(timestamp).strftime(DISPLAY_FORMAT)

    def _localize(self, value: datetime) -> datetime:
        return to_zone(value, self._aggregator.zone)

    def _week_to_ui(self, summary: WeekSummary) -> dict:
        return {
            "label": summary.key.label,
            "week_start": summary.key.start.isoformat(),
            "week_end": summary.key.end.isoformat(),
            "total_hours": str(summary.total_hours),
            "entries": [
                {
                    "id": e.event_id,
                    "type": e.kind.value,
                    "location": e.location,
                    "time": e.timestamp.isoformat(),
                    "display": self.format_time(e.timestamp),
                }
                for e in summary.events
            ],
        }
