from dataclasses import dataclass


@dataclass(frozen=True)
class FlightId:
    """フライトID（カタログが採番する正の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"FlightId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"FlightId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
