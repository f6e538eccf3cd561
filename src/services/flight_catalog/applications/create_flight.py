from aws_lambda_powertools import Logger

from services.flight_catalog.applications.check_duplicate import DuplicateRouteChecker
from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.factory import FlightDetails, FlightFactory
from services.flight_catalog.domain.repository import FlightRepository
from services.shared.domain import DuplicateResourceException

logger = Logger(child=True)


class CreateFlightService:
    """フライト登録のユースケース

    重複ルートは登録させない（厳格チェック）。
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

    def create(self, details: FlightDetails) -> Flight:
        """フライトを登録する"""
        flight = self._factory.create(self._repository.next_id(), details)

        if self._duplicate_checker.is_duplicate(flight):
            raise DuplicateResourceException(
                f"Duplicate flight detected: a flight for {flight.route_slot} "
                "already exists"
            )

        self._repository.save(flight)
        logger.info("Flight created", extra={"flight_id": flight.id.value})
        return flight
