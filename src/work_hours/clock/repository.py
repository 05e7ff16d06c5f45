from __future__ import annotations

from typing import Protocol, Sequence

from .model import ClockEvent


class ClockEventRepository(Protocol):
    """Whole-log storage: the full event list is read and written at once."""

    def load(self) -> list[ClockEvent]:
        raise NotImplementedError

    def save(self, events: Sequence[ClockEvent]) -> None:
        raise NotImplementedError
