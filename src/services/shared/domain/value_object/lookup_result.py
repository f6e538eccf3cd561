from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupOutcome(str, Enum):
    """リモート照会の結果種別"""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """リモート照会の結果（タグ付き）

    ゲートウェイは通信エラーを例外にせず UNAVAILABLE として返す。
    どう扱うか（失敗させるか、縮退させるか）は呼び出し側が決める。
    """

    outcome: LookupOutcome
    value: T | None = None
    reason: str | None = None

    @classmethod
    def found(cls, value: T) -> LookupResult[T]:
        return cls(outcome=LookupOutcome.FOUND, value=value)

    @classmethod
    def not_found(cls) -> LookupResult[T]:
        return cls(outcome=LookupOutcome.NOT_FOUND)

    @classmethod
    def unavailable(cls, reason: str) -> LookupResult[T]:
        return cls(outcome=LookupOutcome.UNAVAILABLE, reason=reason)

    @property
    def is_found(self) -> bool:
        return self.outcome == LookupOutcome.FOUND

    @property
    def is_unavailable(self) -> bool:
        return self.outcome == LookupOutcome.UNAVAILABLE
