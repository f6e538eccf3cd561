from aws_lambda_powertools import Logger

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId
from services.shared.domain import FlightStatus, ResourceNotFoundException

logger = Logger(child=True)


class UpdateFlightStatusService:
    """フライトステータス更新のユースケース

    終端ステータス（CANCELLED / DEPARTED / ARRIVED）からは遷移できない。
    """

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def update_status(self, flight_id: FlightId, status: FlightStatus) -> Flight:
        """ステータスを遷移させる"""
        flight = self._repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found with id: {flight_id}")

        previous = flight.status
        flight.change_status(status)
        if flight.status != previous:
            self._repository.update(flight)
            logger.info(
                "Flight status changed",
                extra={
                    "flight_id": flight_id.value,
                    "from": previous.value,
                    "to": flight.status.value,
                },
            )
        return flight
