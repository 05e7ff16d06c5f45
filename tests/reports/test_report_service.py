from datetime import datetime

from work_hours.clock.service import ClockService
from work_hours.clock.week import WeekAggregator
from work_hours.reports.service import WeeklyReportService


class InMemoryClockEvents:
    def __init__(self):
        self._events = []

    def load(self):
        return list(self._events)

    def save(self, events):
        self._events = list(events)


def test_report_rows_and_summary(zone):
    svc = ClockService(InMemoryClockEvents(), aggregator=WeekAggregator(zone))
    svc.add_custom_pair("Office", datetime(2024, 6, 3, 9, 0), datetime(2024, 6, 3, 17, 0))
    svc.add_custom_pair("Yard", datetime(2024, 6, 11, 7, 0), datetime(2024, 6, 11, 11, 15))

    data = WeeklyReportService(svc).build_report()

    assert data.rows[0] == {
        "week": "Mon Jun 03 2024-Sun Jun 09 2024",
        "type": "Clock In",
        "location": "Office",
        "date": "2024-06-03",
        "time": "09:00",
    }
    assert [s["total_hours"] for s in data.summary] == ["8.00", "4.25"]
    assert [s["entries"] for s in data.summary] == [2, 2]


def test_csv_has_header_and_rows(zone):
    svc = ClockService(InMemoryClockEvents(), aggregator=WeekAggregator(zone))
    svc.add_custom_pair("Office", datetime(2024, 6, 3, 9, 0), datetime(2024, 6, 3, 17, 0))
    report = WeeklyReportService(svc)

    text = report.to_csv(report.build_report()).decode("utf-8-sig")
    lines = text.strip().splitlines()

    assert lines[0] == "week,type,location,date,time"
    assert len(lines) == 3
