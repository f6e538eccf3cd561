from concurrent.futures import Future, ThreadPoolExecutor
from decimal import Decimal

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from services.booking.domain.entity import Reservation
from services.booking.domain.exception import FlightNotBookableException
from services.booking.domain.factory import (
    BookingDetails,
    PnrGenerator,
    ReservationFactory,
)
from services.booking.domain.gateway import (
    FlightCatalogGateway,
    PassengerDirectoryGateway,
)
from services.booking.domain.repository import ReservationRepository
from services.booking.domain.value_object import FlightSnapshot
from services.shared.domain import (
    DependencyUnavailableException,
    DuplicateResourceException,
    InvalidArgumentException,
    LookupResult,
    ResourceNotFoundException,
)

logger = Logger(child=True)

MAX_PNR_ATTEMPTS = 5


class CreateBookingService:
    """予約作成サービス（予約オーケストレーター）

    フライトカタログと乗客ディレクトリを並行して照会してから予約を書き込む。

    - フライトカタログは権威ある依存先: 到達できなければ予約を失敗させる
    - 乗客ディレクトリは縮退可能な依存先: 到達できなければ警告して仮受付する
    - 検証に失敗した場合、予約ストアには何も書き込まない
    """

    def __init__(
        self,
        repository: ReservationRepository,
        factory: ReservationFactory,
        pnr_generator: PnrGenerator,
        flight_catalog: FlightCatalogGateway,
        passenger_directory: PassengerDirectoryGateway,
        metrics: Metrics,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._pnr_generator = pnr_generator
        self._flight_catalog = flight_catalog
        self._passenger_directory = passenger_directory
        self._metrics = metrics

    def create(
        self,
        flight_id: int,
        passenger_id: int,
        seat_selection: str | None = None,
        luggage_count: int = 0,
        luggage_weight: Decimal = Decimal("0"),
    ) -> Reservation:
        """予約を作成する"""
        if flight_id <= 0:
            raise InvalidArgumentException(f"Invalid flight id: {flight_id}")

        self._verify_dependencies(flight_id, passenger_id)

        details: BookingDetails = {
            "flight_id": flight_id,
            "passenger_id": passenger_id,
            "seat_selection": seat_selection,
            "luggage_count": luggage_count,
            "luggage_weight": luggage_weight,
        }
        reservation = self._factory.create(
            self._repository.next_id(), self._pnr_generator.generate(), details
        )
        self._save_with_unique_pnr(reservation)

        logger.info(
            "Booking created",
            extra={
                "booking_id": reservation.id.value,
                "pnr": str(reservation.pnr),
                "flight_id": flight_id,
                "passenger_id": passenger_id,
            },
        )
        self._metrics.add_metric(name="BookingCreated", unit=MetricUnit.Count, value=1)
        return reservation

    def _verify_dependencies(self, flight_id: int, passenger_id: int) -> None:
        """フライトと乗客を並行して照会し、それぞれの方針で判定する"""
        executor = ThreadPoolExecutor(max_workers=2)
        try:
            flight_future: Future[LookupResult[FlightSnapshot]] = executor.submit(
                self._flight_catalog.lookup, flight_id
            )
            passenger_future: Future[LookupResult[bool]] = executor.submit(
                self._passenger_directory.exists, passenger_id
            )
            # フライトの判定で失敗した場合は乗客の照会結果を待たない
            self._check_flight(flight_id, flight_future.result())
            self._check_passenger(passenger_id, passenger_future.result())
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    def _check_flight(flight_id: int, result: LookupResult[FlightSnapshot]) -> None:
        if result.is_unavailable:
            logger.error(
                "Flight catalog unavailable",
                extra={"flight_id": flight_id, "reason": result.reason},
            )
            raise DependencyUnavailableException(
                f"Flight catalog unavailable: {result.reason}"
            )
        if not result.is_found or result.value is None:
            raise ResourceNotFoundException(f"Flight not found with id: {flight_id}")
        if not result.value.accepts_bookings:
            raise FlightNotBookableException(flight_id, result.value.status.value)

    def _check_passenger(self, passenger_id: int, result: LookupResult[bool]) -> None:
        if result.is_unavailable:
            logger.warning(
                "Passenger directory unavailable, accepting passenger provisionally",
                extra={"passenger_id": passenger_id, "reason": result.reason},
            )
            self._metrics.add_metric(
                name="PassengerDirectoryDegraded", unit=MetricUnit.Count, value=1
            )
            if passenger_id <= 0:
                raise ResourceNotFoundException(
                    f"Passenger not found with id: {passenger_id}"
                )
            return
        if not result.is_found or not result.value:
            raise ResourceNotFoundException(
                f"Passenger not found with id: {passenger_id}"
            )

    def _save_with_unique_pnr(self, reservation: Reservation) -> None:
        """PNR が衝突した場合は振り直して再試行する"""
        for attempt in range(1, MAX_PNR_ATTEMPTS + 1):
            try:
                self._repository.save(reservation)
                return
            except DuplicateResourceException:
                if attempt == MAX_PNR_ATTEMPTS:
                    raise
                logger.warning(
                    "PNR collision, regenerating",
                    extra={"pnr": str(reservation.pnr), "attempt": attempt},
                )
                reservation.reassign_pnr(self._pnr_generator.generate())
