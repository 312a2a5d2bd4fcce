"""Port stubs shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone

FIXED_MOMENT = datetime(2022, 9, 10, 23, 48, 26, tzinfo=timezone.utc)


class FixedClock:
    """Clock port stub returning a preset timestamp."""

    def __init__(self, moment: datetime = FIXED_MOMENT) -> None:
        self.moment = moment
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self.moment
