from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Seat:
    """座席。0 は未割り当て"""

    value: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Seat id must not be negative: {self.value}")

    @classmethod
    def unassigned(cls) -> Seat:
        return cls(value=0)

    @classmethod
    def from_selection(cls, selection: str | int | None) -> Seat:
        """座席の指定（数値文字列）を解釈する

        未指定・空文字・数値以外・0 以下はいずれも未割り当てとして扱う。
        """
        if selection is None or isinstance(selection, bool):
            return cls.unassigned()
        try:
            seat_id = int(str(selection).strip())
        except ValueError:
            return cls.unassigned()
        return cls(value=seat_id) if seat_id > 0 else cls.unassigned()
