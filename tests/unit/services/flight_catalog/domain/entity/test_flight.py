from datetime import date
from decimal import Decimal

import pytest

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.value_object import (
    FlightId,
    PriceTiers,
    RouteSlot,
    Schedule,
)
from services.shared.domain import BusinessRuleViolationException, FlightStatus


class TestFlight:
    """Flight Entity のテスト"""

    def test_derived_fields(self, create_flight):
        """最安運賃・所要時間・ステータスカラーは計算で求める"""
        flight = create_flight(first="1200", business="650", economy="180")

        assert flight.min_price == Decimal("180")
        assert flight.duration_minutes == 65
        assert flight.status_color == "#4CAF50"

    def test_min_price_ignores_zero_and_missing_prices(self, create_flight):
        flight = create_flight(first="0", business=None, economy="300")
        assert flight.min_price == Decimal("300")

    def test_min_price_is_zero_without_seat_prices(self, create_flight):
        flight = create_flight(first=None, business=None, economy=None)
        assert flight.min_price == Decimal("0")

    def test_duration_is_none_when_arrival_missing(self, create_flight):
        flight = create_flight(arrival_time=None)
        assert flight.duration_minutes is None

    def test_route_slot_ignores_time_of_day(self, create_flight):
        """路線スロットは出発日のみで比較する"""
        morning = create_flight(flight_id=1, departure_time="2025-01-01T08:00:00")
        evening = create_flight(
            flight_id=2,
            departure_time="2025-01-01T20:00:00",
            arrival_time="2025-01-01T21:00:00",
        )

        assert morning.route_slot == RouteSlot(
            carrier_id=7,
            departure_airport_id=1,
            arrival_airport_id=2,
            departure_date=date(2025, 1, 1),
        )
        assert morning.route_slot == evening.route_slot

    def test_unscheduled_flight_has_no_route_slot(self, create_flight):
        flight = create_flight(departure_time=None, arrival_time=None)
        assert flight.route_slot is None

    def test_change_status(self, create_flight):
        flight = create_flight(status=FlightStatus.ON_TIME)
        flight.change_status(FlightStatus.DELAYED)
        assert flight.status == FlightStatus.DELAYED
        assert flight.status_color == "#FF9800"

    def test_change_status_from_terminal_raises(self, create_flight):
        """終端ステータスからは遷移できない"""
        flight = create_flight(status=FlightStatus.CANCELLED)
        with pytest.raises(BusinessRuleViolationException):
            flight.change_status(FlightStatus.ON_TIME)
        assert flight.status == FlightStatus.CANCELLED

    def test_revise_keeps_status(self, create_flight):
        flight = create_flight(status=FlightStatus.DELAYED)
        revision = create_flight(departure_airport_id=5, economy="90")

        flight.revise(revision)

        assert flight.departure_airport_id == 5
        assert flight.min_price == Decimal("90")
        assert flight.status == FlightStatus.DELAYED

    def test_non_positive_airport_raises(self):
        with pytest.raises(ValueError):
            Flight(
                id=FlightId(value=1),
                carrier_id=7,
                departure_airport_id=0,
                arrival_airport_id=2,
                schedule=Schedule(),
                prices=PriceTiers(),
            )

    def test_equality_by_id(self, create_flight):
        """同じIDのフライトは同一とみなす"""
        assert create_flight(flight_id=3) == create_flight(flight_id=3, economy="1")
        assert create_flight(flight_id=3) != create_flight(flight_id=4)
