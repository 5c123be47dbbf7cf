"""Time sources for surge pricing."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Local wall clock, matching what a shopper sees at checkout."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Clock pinned to a given moment, optionally advanced manually."""

    def __init__(self, moment: datetime) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs: float) -> None:
        self.moment = self.moment + timedelta(**kwargs)
