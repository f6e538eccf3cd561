from datetime import date
from decimal import Decimal

import pytest

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.factory import FlightDetails
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import (
    FlightId,
    PriceTiers,
    Schedule,
)
from services.shared.domain import (
    DuplicateResourceException,
    FlightStatus,
    IsoDateTime,
    ResourceNotFoundException,
)


class InMemoryFlightRepository(FlightRepository):
    """テスト用のインメモリ FlightRepository"""

    def __init__(self) -> None:
        self.flights: dict[int, Flight] = {}
        self._counter = 0

    def next_id(self) -> FlightId:
        self._counter += 1
        return FlightId(value=self._counter)

    def save(self, flight: Flight) -> None:
        if flight.id.value in self.flights:
            raise DuplicateResourceException(f"Flight already exists: {flight.id}")
        self.flights[flight.id.value] = flight
        self._counter = max(self._counter, flight.id.value)

    def update(self, flight: Flight) -> None:
        if flight.id.value not in self.flights:
            raise ResourceNotFoundException(f"Flight not found with id: {flight.id}")
        self.flights[flight.id.value] = flight

    def delete(self, flight_id: FlightId) -> None:
        if self.flights.pop(flight_id.value, None) is None:
            raise ResourceNotFoundException(f"Flight not found with id: {flight_id}")

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        return self.flights.get(flight_id.value)

    def find_all(self) -> list[Flight]:
        return [self.flights[key] for key in sorted(self.flights)]

    def find_by_route(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_date: date | None = None,
    ) -> list[Flight]:
        return [
            flight
            for flight in self.find_all()
            if flight.departure_airport_id == departure_airport_id
            and flight.arrival_airport_id == arrival_airport_id
            and (departure_date is None or flight.departure_date == departure_date)
        ]

    def find_by_departure_date(self, departure_date: date) -> list[Flight]:
        return [f for f in self.find_all() if f.departure_date == departure_date]

    def find_by_status(self, status: FlightStatus) -> list[Flight]:
        return [f for f in self.find_all() if f.status == status]

    def find_by_carrier(self, carrier_id: int) -> list[Flight]:
        return [f for f in self.find_all() if f.carrier_id == carrier_id]


@pytest.fixture
def repository():
    return InMemoryFlightRepository()


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: int = 1,
        carrier_id: int = 7,
        departure_airport_id: int = 1,
        arrival_airport_id: int = 2,
        departure_time: str | None = "2025-01-01T10:00:00",
        arrival_time: str | None = "2025-01-01T11:05:00",
        first: str | None = "1200",
        business: str | None = "650",
        economy: str | None = "180",
        status: FlightStatus = FlightStatus.ON_TIME,
    ) -> Flight:
        return Flight(
            id=FlightId(value=flight_id),
            carrier_id=carrier_id,
            departure_airport_id=departure_airport_id,
            arrival_airport_id=arrival_airport_id,
            schedule=Schedule(
                departure=(
                    IsoDateTime.from_string(departure_time) if departure_time else None
                ),
                arrival=IsoDateTime.from_string(arrival_time) if arrival_time else None,
            ),
            prices=PriceTiers(
                first=Decimal(first) if first else None,
                business=Decimal(business) if business else None,
                economy=Decimal(economy) if economy else None,
            ),
            status=status,
        )

    return _factory


@pytest.fixture
def flight_details():
    """FlightDetails を生成する Factory fixture"""

    def _factory(**overrides) -> FlightDetails:
        details: FlightDetails = {
            "carrier_id": 7,
            "departure_airport_id": 1,
            "arrival_airport_id": 2,
            "departure_time": "2025-01-01T10:00:00",
            "arrival_time": "2025-01-01T11:05:00",
            "first_price": Decimal("1200"),
            "business_price": Decimal("650"),
            "economy_price": Decimal("180"),
            "luggage_price": None,
            "weight_price": None,
            "status": None,
        }
        details.update(overrides)
        return details

    return _factory
