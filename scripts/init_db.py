from __future__ import annotations

import importlib

from dotenv import load_dotenv

from work_hours.config import get_settings_module
from work_hours.database.bootstrap import ensure_schema
from work_hours.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    ensure_schema(DatabaseConnection.get_instance(config))
    print(f"OK: clock_events ready -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()
