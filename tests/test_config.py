from types import SimpleNamespace

import pytest

from work_hours.clock.json_clock_repository import JsonFileClockRepository
from work_hours.config import get_settings_module
from work_hours.container import build_repository


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "work_hours.config.production"),
        ("prod", "work_hours.config.production"),
        ("testing", "work_hours.config.testing"),
        ("anything", "work_hours.config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_json_backend_is_built(tmp_path):
    settings = SimpleNamespace(STORAGE_BACKEND="JSON", STORAGE_PATH=str(tmp_path / "x.json"), STORAGE_KEY="workLogs")
    repo = build_repository(settings)
    assert isinstance(repo, JsonFileClockRepository)
    assert repo.path == tmp_path / "x.json"


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        build_repository(SimpleNamespace(STORAGE_BACKEND="redis"))
