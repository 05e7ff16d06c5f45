from __future__ import annotations

import logging
from typing import Sequence

import mysql.connector

from ..core.exceptions import StorageError
from ..database.mysql_base import db_cursor, fetchall
from .model import ClockEvent
from .repository import ClockEventRepository

logger = logging.getLogger(__name__)


class MySQLClockRepository(ClockEventRepository):
    """Stores the log as rows ordered by ``seq``.

    ``event_time`` holds the ISO-8601 text so offsets survive the round trip.
    """

    def __init__(self, conn_factory):
        self._conn_factory = conn_factory

    def load(self) -> list[ClockEvent]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT event_id, kind, event_time, location
                    FROM clock_events
                    ORDER BY seq ASC
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            logger.exception("Error fetching work logs")
            raise StorageError(f"Cannot read work logs: {e}") from e

        return [
            ClockEvent.from_dict(
                {"id": r["event_id"], "type": r["kind"], "time": r.get("event_time"), "location": r.get("location")}
            )
            for r in rows
        ]

    def save(self, events: Sequence[ClockEvent]) -> None:
        params = []
        for seq, e in enumerate(events):
            stored = e.to_dict()
            event_time = stored.get("time")
            params.append(
                (e.event_id, seq, str(stored["type"]), None if event_time is None else str(event_time), e.location)
            )
        try:
            with db_cursor(self._conn_factory, dictionary=False) as (_, cur):
                cur.execute("DELETE FROM clock_events")
                if params:
                    cur.executemany(
                        """
                        INSERT INTO clock_events(event_id, seq, kind, event_time, location)
                        VALUES(%s,%s,%s,%s,%s)
                        """,
                        params,
                    )
        except mysql.connector.Error as e:
            logger.exception("Error saving work logs")
            raise StorageError(f"Cannot save work logs: {e}") from e
