from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId, RouteSlot


class DuplicateRouteChecker:
    """路線スロットの重複判定

    航空会社・出発空港・到着空港・出発日が一致するフライトを重複とみなす。
    exclude_id を指定すると、そのフライト自身（更新対象）を比較から除外する。
    """

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def is_duplicate(self, flight: Flight, exclude_id: FlightId | None = None) -> bool:
        """フライトが既存フライトと重複するか"""
        return self.is_slot_taken(flight.route_slot, exclude_id)

    def is_slot_taken(
        self, slot: RouteSlot | None, exclude_id: FlightId | None = None
    ) -> bool:
        """路線スロットが既に使われているか"""
        if slot is None:
            return False
        candidates = self._repository.find_by_route(
            slot.departure_airport_id,
            slot.arrival_airport_id,
            slot.departure_date,
        )
        return any(
            candidate.route_slot == slot and candidate.id != exclude_id
            for candidate in candidates
        )
