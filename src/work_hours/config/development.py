import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

TIMEZONE = os.getenv("TIMEZONE", "America/Los_Angeles")

# "json" keeps the whole log in one file, "mysql" uses DB_CONFIG
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
STORAGE_PATH = os.getenv("STORAGE_PATH", "data/work_logs.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "workLogs")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_hours"),
}

DEBUG = True

# If enabled, the clock_events table is created on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
