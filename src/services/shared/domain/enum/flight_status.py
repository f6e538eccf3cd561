from __future__ import annotations

from enum import Enum

from ..exception import InvalidArgumentException


class FlightStatus(str, Enum):
    """フライトステータス

    ON_TIME ⇄ DELAYED → CANCELLED（終端）
    ON_TIME / DELAYED → BOARDING → DEPARTED → ARRIVED（終端）

    遷移の可否はこのクラスだけで判定する。
    カタログのステータス更新と、予約受付の判定の両方がここを参照する。
    """

    ON_TIME = "ON_TIME"
    DELAYED = "DELAYED"
    CANCELLED = "CANCELLED"
    BOARDING = "BOARDING"
    DEPARTED = "DEPARTED"
    ARRIVED = "ARRIVED"

    @classmethod
    def parse(cls, value: str | None) -> FlightStatus:
        """文字列からステータスを生成する

        未指定・空文字は ON_TIME。"On Time" のような旧表記も受け付ける。
        """
        if value is None or not value.strip():
            return cls.ON_TIME
        normalized = value.strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls(normalized)
        except ValueError as e:
            raise InvalidArgumentException(f"Unknown flight status: {value}") from e

    @property
    def is_terminal(self) -> bool:
        """終端ステータスかどうか"""
        return self in _TERMINAL

    @property
    def accepts_bookings(self) -> bool:
        """新規予約を受け付けるかどうか"""
        return not self.is_terminal

    @property
    def color(self) -> str:
        """表示用のカラーコード"""
        return _COLORS[self]

    def can_transition_to(self, target: FlightStatus) -> bool:
        """target への遷移が許可されているか（同じステータスへの更新は許可）"""
        if target == self:
            return True
        return target in _TRANSITIONS[self]


_TRANSITIONS: dict[FlightStatus, frozenset[FlightStatus]] = {
    FlightStatus.ON_TIME: frozenset(
        {FlightStatus.DELAYED, FlightStatus.CANCELLED, FlightStatus.BOARDING}
    ),
    FlightStatus.DELAYED: frozenset(
        {FlightStatus.ON_TIME, FlightStatus.CANCELLED, FlightStatus.BOARDING}
    ),
    FlightStatus.BOARDING: frozenset({FlightStatus.DEPARTED}),
    FlightStatus.DEPARTED: frozenset({FlightStatus.ARRIVED}),
    FlightStatus.CANCELLED: frozenset(),
    FlightStatus.ARRIVED: frozenset(),
}

_TERMINAL = frozenset(
    {FlightStatus.CANCELLED, FlightStatus.DEPARTED, FlightStatus.ARRIVED}
)

_COLORS: dict[FlightStatus, str] = {
    FlightStatus.ON_TIME: "#4CAF50",
    FlightStatus.DELAYED: "#FF9800",
    FlightStatus.CANCELLED: "#F44336",
    FlightStatus.BOARDING: "#2196F3",
    FlightStatus.DEPARTED: "#9C27B0",
    FlightStatus.ARRIVED: "#00BCD4",
}
