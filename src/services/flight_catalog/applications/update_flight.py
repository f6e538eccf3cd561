from aws_lambda_powertools import Logger

from services.flight_catalog.applications.check_duplicate import DuplicateRouteChecker
from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.factory import FlightDetails, FlightFactory
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId
from services.shared.domain import FlightStatus, ResourceNotFoundException

logger = Logger(child=True)


class UpdateFlightService:
    """フライト更新のユースケース

    重複ルートの検出は警告ログのみで、更新は止めない（登録時との非対称）。
    ステータスが指定された場合は遷移ルールに従って変更する。
    """

    def __init__(
        self,
        repository: FlightRepository,
        factory: FlightFactory,
        duplicate_checker: DuplicateRouteChecker,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._duplicate_checker = duplicate_checker

    def update(self, flight_id: FlightId, details: FlightDetails) -> Flight:
        """フライトを更新する"""
        flight = self._repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found with id: {flight_id}")

        revision = self._factory.create(flight_id, details)
        if self._duplicate_checker.is_duplicate(revision, exclude_id=flight_id):
            logger.warning(
                "Duplicate flight detected, continuing update",
                extra={
                    "flight_id": flight_id.value,
                    "route_slot": str(revision.route_slot),
                },
            )

        flight.revise(revision)
        if self._has_status(details):
            flight.change_status(FlightStatus.parse(details.get("status")))

        self._repository.update(flight)
        return flight

    @staticmethod
    def _has_status(details: FlightDetails) -> bool:
        status = details.get("status")
        return status is not None and bool(status.strip())
