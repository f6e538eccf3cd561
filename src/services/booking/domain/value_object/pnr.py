from __future__ import annotations

import re
from dataclasses import dataclass

_PNR_PATTERN = re.compile(r"^[A-Z0-9]{6}$")


@dataclass(frozen=True)
class Pnr:
    """PNR（Passenger Name Record）

    6文字の英大文字・数字。全予約で一意。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _PNR_PATTERN.match(self.value):
            raise ValueError(f"Invalid PNR format: {self.value!r}")

    @classmethod
    def parse(cls, value: str) -> Pnr:
        """大文字・小文字を区別せずに PNR を解釈する"""
        return cls(value=value.strip().upper())

    def __str__(self) -> str:
        return self.value
