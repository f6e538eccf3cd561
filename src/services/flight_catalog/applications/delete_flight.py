from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId


class DeleteFlightService:
    """フライト削除のユースケース"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def delete(self, flight_id: FlightId) -> None:
        self._repository.delete(flight_id)
