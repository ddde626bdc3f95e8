"""Injectable time source so accrual and date checks are deterministic in tests"""

from datetime import date, datetime, timedelta, timezone
from typing import Protocol

from collection_gateway.utils.date_utils import ensure_utc


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """Wall-clock time in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Clock frozen at a given instant; advance() moves it forward"""

    def __init__(self, instant: datetime):
        self.instant = ensure_utc(instant)

    def now(self) -> datetime:
        return self.instant

    def today(self) -> date:
        return self.instant.date()

    def advance(self, **delta) -> None:
        self.instant = self.instant + timedelta(**delta)
