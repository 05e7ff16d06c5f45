from __future__ import annotations

import logging

from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

CLOCK_EVENTS_DDL = """
CREATE TABLE IF NOT EXISTS clock_events (
    event_id    VARCHAR(32)  NOT NULL PRIMARY KEY,
    seq         INT          NOT NULL,
    kind        VARCHAR(16)  NOT NULL,
    event_time  VARCHAR(40)  NULL,
    location    VARCHAR(255) NULL,
    INDEX idx_clock_events_seq (seq)
)
"""


def ensure_schema(conn_factory) -> None:
    """Create the clock_events table if missing (idempotent)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(CLOCK_EVENTS_DDL)
    logger.info("clock_events schema ready")
