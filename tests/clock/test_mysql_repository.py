from datetime import datetime

import mysql.connector
import pytest

from work_hours.clock.model import ClockEvent
from work_hours.clock.mysql_clock_repository import MySQLClockRepository
from work_hours.core.enums import ClockEventType
from work_hours.core.exceptions import StorageError


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def executemany(self, sql, params):
        self.executed.append((" ".join(sql.split()), list(params)))

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=()):
        self.cursor = FakeCursor(list(rows))
        self.connection = FakeConnection(self.cursor)

    def connect(self):
        return self.connection


class BrokenConnFactory:
    def connect(self):
        raise mysql.connector.Error("server has gone away")


def test_load_maps_rows_in_order():
    factory = FakeConnFactory(
        [
            {"event_id": "a", "kind": "Clock In", "event_time": "2024-06-03T09:00:00-07:00", "location": "Yard"},
            {"event_id": "b", "kind": "Clock Out", "event_time": None, "location": "Yard"},
        ]
    )

    events = MySQLClockRepository(factory).load()

    assert [e.event_id for e in events] == ["a", "b"]
    assert events[0].timestamp.hour == 9
    assert events[1].timestamp is None
    assert "ORDER BY seq ASC" in factory.cursor.executed[0][0]


def test_save_replaces_rows_with_sequence(zone):
    factory = FakeConnFactory()
    events = [
        ClockEvent(kind=ClockEventType.CLOCK_IN, timestamp=datetime(2024, 6, 3, 9, 0, tzinfo=zone), location="Yard", event_id="a"),
        ClockEvent(kind=ClockEventType.CLOCK_OUT, timestamp=datetime(2024, 6, 3, 17, 0, tzinfo=zone), location="Yard", event_id="b"),
    ]

    MySQLClockRepository(factory).save(events)

    delete_sql, insert = factory.cursor.executed
    assert delete_sql[0] == "DELETE FROM clock_events"
    assert [row[:3] for row in insert[1]] == [("a", 0, "Clock In"), ("b", 1, "Clock Out")]
    assert factory.connection.committed


def test_connection_failure_is_storage_error():
    with pytest.raises(StorageError):
        MySQLClockRepository(BrokenConnFactory()).load()


def test_save_writes_back_unparseable_values():
    factory = FakeConnFactory()
    event = ClockEvent.from_dict({"id": "x", "type": "Lunch", "time": "noon", "location": "Yard"})

    MySQLClockRepository(factory).save([event])

    _, insert = factory.cursor.executed
    assert insert[1] == [("x", 0, "Lunch", "noon", "Yard")]
