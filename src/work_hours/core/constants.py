"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "America/Los_Angeles"
DEFAULT_STORAGE_KEY = "workLogs"
DAYS_PER_WEEK = 7
HOURS_QUANTUM = "0.01"
