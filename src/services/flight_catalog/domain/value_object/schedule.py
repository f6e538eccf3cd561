from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from services.shared.domain import IsoDateTime


@dataclass(frozen=True)
class Schedule:
    """運航スケジュール（出発時刻 + 到着時刻、いずれも未定を許容）"""

    departure: IsoDateTime | None = None
    arrival: IsoDateTime | None = None

    def __post_init__(self) -> None:
        if self.departure is None or self.arrival is None:
            return
        if self.arrival.is_before(self.departure):
            raise ValueError("Arrival time must not be before departure time")

    @property
    def departure_date(self) -> date | None:
        if self.departure is None:
            return None
        return self.departure.calendar_date

    @property
    def duration_minutes(self) -> int | None:
        """所要時間（分）。どちらかが未定なら None"""
        if self.departure is None or self.arrival is None:
            return None
        return self.departure.minutes_until(self.arrival)
