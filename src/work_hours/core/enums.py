from __future__ import annotations

from enum import Enum


class ClockEventType(str, Enum):
    """Kind of a clock event. Values are the labels stored in the log."""

    CLOCK_IN = "Clock In"
    CLOCK_OUT = "Clock Out"


class StorageBackend(str, Enum):
    JSON = "json"
    MYSQL = "mysql"
