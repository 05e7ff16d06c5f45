from __future__ import annotations

from datetime import datetime
from types import SimpleNamespace

import pytest

from work_hours.common.datetime_utils import get_zone
from work_hours.main import create_app

LA = get_zone("America/Los_Angeles")


@pytest.fixture
def zone():
    return LA


@pytest.fixture
def fixed_now():
    # Monday morning
    return datetime(2024, 6, 3, 9, 0, tzinfo=LA)


@pytest.fixture
def settings(tmp_path):
    return SimpleNamespace(
        SECRET_KEY="test-secret",
        DEBUG=False,
        TESTING=True,
        TIMEZONE="America/Los_Angeles",
        STORAGE_BACKEND="json",
        STORAGE_PATH=str(tmp_path / "work_logs.json"),
        STORAGE_KEY="workLogs",
        DB_CONFIG={},
        AUTO_INIT_DB=False,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()
