from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    "2025-01-01T10:00:00" のほか、旧クライアントの "2025-01-01 10:00" も受け付ける。
    オフセットなしの値は UTC とみなし、常に UTC に揃えて保持する。
    """

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        if dt.tzinfo is None:
            return cls(value=dt.replace(tzinfo=timezone.utc))
        return cls(value=dt.astimezone(timezone.utc))

    @classmethod
    def now(cls) -> IsoDateTime:
        """現在時刻（UTC）"""
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        return self.value.isoformat()

    @property
    def calendar_date(self) -> date:
        """日付部分（時刻は無視する）"""
        return self.value.date()

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value

    def minutes_until(self, other: IsoDateTime) -> int:
        """他の日時までの経過分数（端数切り捨て）"""
        return int((other.value - self.value).total_seconds() // 60)
