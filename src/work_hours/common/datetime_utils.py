from __future__ import annotations

from datetime import date, datetime, tzinfo
from functools import lru_cache
from typing import Any, Optional
from zoneinfo import ZoneInfo

from ..core.constants import DEFAULT_TIMEZONE


@lru_cache(maxsize=None)
def get_zone(name: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    return ZoneInfo(name)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp.

    Accepts the JavaScript ``Date.toJSON()`` form (``...T16:00:00.000Z``)
    as well as offsets and naive values. Raises ``ValueError``.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def coerce_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort conversion of a stored ``time`` value.

    Missing or malformed values are treated as absent.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_iso_datetime(value)
    except ValueError:
        return None


def to_zone(value: datetime, zone: tzinfo) -> datetime:
    """Express ``value`` in ``zone``. Naive values are taken as already local."""
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def now_local(zone: Optional[tzinfo] = None) -> datetime:
    """Current time in the reference zone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(zone or get_zone())
