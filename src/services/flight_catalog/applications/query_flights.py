from datetime import date
from decimal import Decimal
from typing import Callable, TypeVar

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.enum import SortCriterion
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId
from services.shared.domain import (
    FlightStatus,
    InvalidArgumentException,
    ResourceNotFoundException,
)

K = TypeVar("K")


def sort_flights(
    flights: list[Flight], criterion: SortCriterion, descending: bool = False
) -> list[Flight]:
    """フライトを並び替える

    同値の場合は元の並び順を保つ（安定ソート）。
    並び替えのキーを持たないフライト（出発時刻・所要時間が未定）は常に末尾に置く。
    """
    key: Callable[[Flight], object | None] = _SORT_KEYS[criterion]
    with_key = [flight for flight in flights if key(flight) is not None]
    without_key = [flight for flight in flights if key(flight) is None]
    return sorted(with_key, key=key, reverse=descending) + without_key


_SORT_KEYS: dict[SortCriterion, Callable[[Flight], object | None]] = {
    SortCriterion.DEPARTURE_TIME: lambda f: (
        f.schedule.departure.value if f.schedule.departure else None
    ),
    SortCriterion.PRICE: lambda f: f.min_price,
    SortCriterion.DURATION: lambda f: f.duration_minutes,
}


def _within(value: K | None, lower: K | None, upper: K | None) -> bool:
    if value is None:
        return False
    if lower is not None and value < lower:
        return False
    return upper is None or value <= upper


class FlightQueryService:
    """フライトカタログの検索・絞り込み・並び替え"""

    def __init__(self, repository: FlightRepository) -> None:
        self._repository = repository

    def find(self, flight_id: FlightId) -> Flight | None:
        return self._repository.find_by_id(flight_id)

    def get(self, flight_id: FlightId) -> Flight:
        flight = self._repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found with id: {flight_id}")
        return flight

    def get_status(self, flight_id: FlightId) -> FlightStatus:
        return self.get(flight_id).status

    def list_all(self) -> list[Flight]:
        return self._repository.find_all()

    def list_by_carrier(self, carrier_id: int) -> list[Flight]:
        return self._repository.find_by_carrier(carrier_id)

    def list_by_status(self, status: FlightStatus) -> list[Flight]:
        return self._repository.find_by_status(status)

    def search_by_date(self, departure_date: date) -> list[Flight]:
        return self._repository.find_by_departure_date(departure_date)

    def search_by_route(
        self, departure_airport_id: int, arrival_airport_id: int
    ) -> list[Flight]:
        return self._repository.find_by_route(departure_airport_id, arrival_airport_id)

    def search_by_route_and_date(
        self, departure_airport_id: int, arrival_airport_id: int, departure_date: date
    ) -> list[Flight]:
        return self._repository.find_by_route(
            departure_airport_id, arrival_airport_id, departure_date
        )

    def filter_by_max_price(self, max_price: Decimal) -> list[Flight]:
        return self.filter_by_price_range(None, max_price)

    def filter_by_price_range(
        self, min_price: Decimal | None, max_price: Decimal
    ) -> list[Flight]:
        """最安運賃が範囲内のフライト（両端を含む）"""
        self._check_range(min_price, max_price)
        return [
            flight
            for flight in self._repository.find_all()
            if _within(flight.min_price, min_price, max_price)
        ]

    def filter_by_max_duration(self, max_minutes: int) -> list[Flight]:
        return self.filter_by_duration_range(None, max_minutes)

    def filter_by_duration_range(
        self, min_minutes: int | None, max_minutes: int
    ) -> list[Flight]:
        """所要時間が範囲内のフライト（両端を含む、所要時間不明は除外）"""
        self._check_range(min_minutes, max_minutes)
        return [
            flight
            for flight in self._repository.find_all()
            if _within(flight.duration_minutes, min_minutes, max_minutes)
        ]

    def sort(self, criterion: SortCriterion, descending: bool = False) -> list[Flight]:
        return sort_flights(self._repository.find_all(), criterion, descending)

    @staticmethod
    def _check_range(lower, upper) -> None:
        if lower is not None and lower > upper:
            raise InvalidArgumentException(
                f"Lower bound {lower} is greater than upper bound {upper}"
            )
