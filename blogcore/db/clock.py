"""Time source injected into the repositories."""
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from blogcore.db.models import now_utc


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in aware UTC, matching the model timestamp defaults."""

    def now(self) -> datetime:
        return now_utc()
