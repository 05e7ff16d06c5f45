from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_after(later: datetime, earlier: datetime, message: str) -> datetime:
    if later <= earlier:
        raise ValidationError(message)
    return later
