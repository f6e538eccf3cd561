from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.entity import Reservation
from services.booking.domain.enum import BookingStatus
from services.booking.domain.factory import PnrGenerator, ReservationFactory
from services.booking.domain.gateway import (
    FlightCatalogGateway,
    PassengerDirectoryGateway,
)
from services.booking.domain.repository import ReservationRepository
from services.booking.domain.value_object import (
    FlightSnapshot,
    Pnr,
    ReservationId,
    Seat,
)
from services.shared.domain import (
    DuplicateResourceException,
    FlightStatus,
    IsoDateTime,
    LookupResult,
    OptimisticLockException,
)


class InMemoryReservationRepository(ReservationRepository):
    """テスト用のインメモリ ReservationRepository

    PNR の一意性制約と、ステータスの楽観ロックを再現する。
    """

    def __init__(self) -> None:
        self.reservations: dict[int, Reservation] = {}
        self.statuses: dict[int, BookingStatus] = {}
        self.writes = 0
        self._counter = 0

    def next_id(self) -> ReservationId:
        self._counter += 1
        return ReservationId(value=self._counter)

    def save(self, reservation: Reservation) -> None:
        if reservation.id.value in self.reservations or any(
            existing.pnr == reservation.pnr for existing in self.reservations.values()
        ):
            raise DuplicateResourceException(
                f"Booking or PNR already exists: {reservation.pnr}"
            )
        self.reservations[reservation.id.value] = reservation
        self.statuses[reservation.id.value] = reservation.status
        self.writes += 1

    def update(
        self, reservation: Reservation, expected_status: BookingStatus | None = None
    ) -> None:
        current = self.statuses[reservation.id.value]
        if expected_status is not None and current != expected_status:
            raise OptimisticLockException("Booking status conflict")
        self.reservations[reservation.id.value] = reservation
        self.statuses[reservation.id.value] = reservation.status
        self.writes += 1

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        return self.reservations.get(reservation_id.value)

    def find_by_pnr(self, pnr: Pnr) -> Reservation | None:
        return next(
            (r for r in self.reservations.values() if r.pnr == pnr),
            None,
        )

    def find_by_passenger(self, passenger_id: int) -> list[Reservation]:
        return [
            self.reservations[key]
            for key in sorted(self.reservations)
            if self.reservations[key].passenger_id == passenger_id
        ]


class StubFlightCatalog(FlightCatalogGateway):
    """フライト照会の結果を固定で返すスタブ"""

    def __init__(self, result: LookupResult[FlightSnapshot] | None = None) -> None:
        self.result = result
        self.calls: list[int] = []

    def lookup(self, flight_id: int) -> LookupResult[FlightSnapshot]:
        self.calls.append(flight_id)
        if self.result is not None:
            return self.result
        return LookupResult.found(
            FlightSnapshot(flight_id=flight_id, status=FlightStatus.ON_TIME)
        )


class StubPassengerDirectory(PassengerDirectoryGateway):
    """乗客照会の結果を固定で返すスタブ"""

    def __init__(self, result: LookupResult[bool] | None = None) -> None:
        self.result = result if result is not None else LookupResult.found(True)
        self.calls: list[int] = []

    def exists(self, passenger_id: int) -> LookupResult[bool]:
        self.calls.append(passenger_id)
        return self.result


class SequencePnrGenerator(PnrGenerator):
    """決められた順に PNR を返すジェネレータ"""

    def __init__(self, *values: str) -> None:
        self._values = list(values)

    def generate(self) -> Pnr:
        return Pnr(value=self._values.pop(0))


@pytest.fixture
def repository():
    return InMemoryReservationRepository()


@pytest.fixture
def flight_catalog():
    return StubFlightCatalog()


@pytest.fixture
def passenger_directory():
    return StubPassengerDirectory()


@pytest.fixture
def metrics():
    return MagicMock()


@pytest.fixture
def create_service(repository, flight_catalog, passenger_directory, metrics):
    """CreateBookingService を生成する Factory fixture"""

    def _factory(*pnrs: str) -> CreateBookingService:
        return CreateBookingService(
            repository=repository,
            factory=ReservationFactory(),
            pnr_generator=SequencePnrGenerator(*pnrs) if pnrs else PnrGenerator(),
            flight_catalog=flight_catalog,
            passenger_directory=passenger_directory,
            metrics=metrics,
        )

    return _factory


@pytest.fixture
def create_reservation():
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        reservation_id: int = 1,
        pnr: str = "ABC123",
        flight_id: int = 101,
        passenger_id: int = 202,
        seat_id: int = 12,
        status: BookingStatus = BookingStatus.BOOKED,
    ) -> Reservation:
        return Reservation(
            id=ReservationId(value=reservation_id),
            pnr=Pnr(value=pnr),
            flight_id=flight_id,
            passenger_id=passenger_id,
            seat=Seat(value=seat_id),
            luggage_count=1,
            luggage_weight=Decimal("18.5"),
            status=status,
            created_at=IsoDateTime.from_string("2025-01-01T00:00:00+00:00"),
        )

    return _factory
