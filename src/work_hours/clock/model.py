from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import coerce_timestamp
from ..core.enums import ClockEventType


def new_event_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ClockEvent:
    """Domain entity: a single clock-in or clock-out record.

    ``timestamp`` is ``None`` when the stored value was missing or could not
    be parsed; such events are kept in the log but never bucketed.
    """

    kind: ClockEventType
    timestamp: Optional[datetime]
    location: Optional[str] = None
    event_id: str = field(default_factory=new_event_id)
    # Stored values that could not be parsed, written back unchanged.
    raw: Optional[dict[str, Any]] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Wire/storage shape: ``{"type", "time", "location"?, "id"}``."""
        data: dict[str, Any] = {
            "type": self.kind.value,
            "time": self.timestamp.isoformat() if self.timestamp else None,
        }
        if self.location is not None:
            data["location"] = self.location
        if self.raw:
            data.update(self.raw)
        data["id"] = self.event_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClockEvent":
        raw: dict[str, Any] = {}
        try:
            kind = ClockEventType(data.get("type"))
        except ValueError:
            # Unknown labels keep their slot in the log but carry no time.
            kind = ClockEventType.CLOCK_IN
            raw["type"] = data.get("type")

        timestamp = coerce_timestamp(data.get("time")) if not raw else None
        if timestamp is None and "time" in data:
            raw["time"] = data.get("time")

        return cls(
            kind=kind,
            timestamp=timestamp,
            location=data.get("location"),
            event_id=str(data.get("id") or new_event_id()),
            raw=raw or None,
        )
