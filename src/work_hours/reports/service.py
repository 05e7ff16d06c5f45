from __future__ import annotations

import csv
import io
from dataclasses import dataclass

from ..clock.service import ClockService
from ..common.datetime_utils import to_zone

REPORT_FIELDS = ["week", "type", "location", "date", "time"]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class WeeklyReportService:
    def __init__(self, clock_service: ClockService):
        self._clock = clock_service

    def build_report(self) -> ReportData:
        zone = self._clock.aggregator.zone
        out_rows: list[dict] = []
        summary: list[dict] = []

        for week in self._clock.weekly_summary():
            for e in week.events:
                local = to_zone(e.timestamp, zone)
                out_rows.append(
                    {
                        "week": week.key.label,
                        "type": e.kind.value,
                        "location": e.location or "",
                        "date": local.strftime("%Y-%m-%d"),
                        "time": local.strftime("%H:%M"),
                    }
                )
            summary.append(
                {
                    "week": week.key.label,
                    "week_start": week.key.start.isoformat(),
                    "week_end": week.key.end.isoformat(),
                    "entries": len(week.events),
                    "total_hours": str(week.total_hours),
                }
            )

        return ReportData(rows=out_rows, summary=summary)

    def to_csv(self, data: ReportData) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")
