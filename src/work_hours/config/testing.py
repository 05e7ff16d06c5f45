import os

SECRET_KEY = "test-secret"

TIMEZONE = "America/Los_Angeles"

STORAGE_BACKEND = "json"
STORAGE_PATH = os.getenv("STORAGE_PATH", "work_logs.test.json")
STORAGE_KEY = "workLogs"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_hours_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
