from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RouteSlot:
    """路線スロット（航空会社 + 出発空港 + 到着空港 + 出発日）

    同じスロットを持つフライトは重複とみなす。時刻は比較しない。
    """

    carrier_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_date: date

    def __str__(self) -> str:
        return (
            f"carrier={self.carrier_id} "
            f"{self.departure_airport_id}->{self.arrival_airport_id} "
            f"on {self.departure_date.isoformat()}"
        )
