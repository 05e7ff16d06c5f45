from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import StorageError
from .model import ClockEvent
from .repository import ClockEventRepository

logger = logging.getLogger(__name__)


class JsonFileClockRepository(ClockEventRepository):
    """Key-value style storage: one JSON document, the log under ``key``."""

    def __init__(self, path: str | os.PathLike, *, key: str = DEFAULT_STORAGE_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[ClockEvent]:
        if not self._path.exists():
            return []
        try:
            document = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            logger.exception("Error fetching work logs from %s", self._path)
            raise StorageError(f"Cannot read work logs: {e}") from e

        raw = document.get(self._key) if isinstance(document, dict) else None
        if not isinstance(raw, list):
            return []
        return [ClockEvent.from_dict(item) for item in raw if isinstance(item, dict)]

    def save(self, events: Sequence[ClockEvent]) -> None:
        document = {}
        if self._path.exists():
            try:
                existing = json.loads(self._path.read_text(encoding="utf-8") or "{}")
                if isinstance(existing, dict):
                    document = existing
            except (OSError, ValueError):
                logger.warning("Overwriting unreadable storage file %s", self._path)
        document[self._key] = [e.to_dict() for e in events]

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".worklogs-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as e:
            logger.exception("Error saving work logs to %s", self._path)
            raise StorageError(f"Cannot save work logs: {e}") from e
