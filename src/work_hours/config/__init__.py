import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "work_hours.config.production"

    if env in {"test", "testing"}:
        return "work_hours.config.testing"

    return "work_hours.config.development"
