import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

TIMEZONE = os.getenv("TIMEZONE", "America/Los_Angeles")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
STORAGE_PATH = os.getenv("STORAGE_PATH", "/data/work_logs.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "workLogs")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "work_hours"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
