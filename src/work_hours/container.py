from __future__ import annotations

import logging
from dataclasses import dataclass

from .clock.json_clock_repository import JsonFileClockRepository
from .clock.mysql_clock_repository import MySQLClockRepository
from .clock.repository import ClockEventRepository
from .clock.service import ClockService
from .clock.week import WeekAggregator
from .common.datetime_utils import get_zone
from .core.constants import DEFAULT_STORAGE_KEY, DEFAULT_TIMEZONE
from .core.enums import StorageBackend
from .database.bootstrap import ensure_schema
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import WeeklyReportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    events_repo: ClockEventRepository

    clock_service: ClockService
    report_service: WeeklyReportService


def build_repository(settings) -> ClockEventRepository:
    try:
        backend = StorageBackend(str(getattr(settings, "STORAGE_BACKEND", "json")).lower())
    except ValueError as e:
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND!r}") from e

    if backend == StorageBackend.MYSQL:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if getattr(settings, "AUTO_INIT_DB", False):
            ensure_schema(conn)
        return MySQLClockRepository(conn)

    return JsonFileClockRepository(
        getattr(settings, "STORAGE_PATH"),
        key=getattr(settings, "STORAGE_KEY", DEFAULT_STORAGE_KEY),
    )


def build_container(settings) -> Container:
    events_repo = build_repository(settings)
    aggregator = WeekAggregator(get_zone(getattr(settings, "TIMEZONE", DEFAULT_TIMEZONE)))
    clock_service = ClockService(events_repo, aggregator=aggregator)
    report_service = WeeklyReportService(clock_service)
    logger.info("Using %s storage", type(events_repo).__name__)

    return Container(
        events_repo=events_repo,
        clock_service=clock_service,
        report_service=report_service,
    )
