from __future__ import annotations

from enum import Enum

from services.shared.domain.exception import InvalidArgumentException


class SortCriterion(str, Enum):
    """フライト一覧の並び替え基準"""

    DEPARTURE_TIME = "departure-time"
    PRICE = "price"
    DURATION = "duration"

    @classmethod
    def parse(cls, value: str) -> SortCriterion:
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            supported = ", ".join(c.value for c in cls)
            raise InvalidArgumentException(
                f"Unsupported sort criterion: {value}. Supported: {supported}"
            ) from e
