"""Day-of-month providers used to rotate the daily theme."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Protocol


class DayProvider(Protocol):
    def day_of_month(self) -> int:
        ...


class SystemClock:
    """Reads the current local date."""

    def __init__(self, today: Optional[Callable[[], date]] = None) -> None:
        self._today = today or date.today

    def day_of_month(self) -> int:
        return self._today().day


class FixedClock:
    """Always reports the same day; used by tests and ``--day``."""

    def __init__(self, day: int) -> None:
        if not 1 <= day <= 31:
            raise ValueError(f"Day of month must be within 1-31, got {day}")
        self.day = day

    def day_of_month(self) -> int:
        return self.day

    def __repr__(self) -> str:
        return f"FixedClock(day={self.day})"
