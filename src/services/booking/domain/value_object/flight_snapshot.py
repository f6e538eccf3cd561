from dataclasses import dataclass

from services.shared.domain import FlightStatus


@dataclass(frozen=True)
class FlightSnapshot:
    """フライトカタログから照会した時点のフライト情報"""

    flight_id: int
    status: FlightStatus

    @property
    def accepts_bookings(self) -> bool:
        return self.status.accepts_bookings
