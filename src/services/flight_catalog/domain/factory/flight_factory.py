from decimal import Decimal
from typing import TypedDict

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.value_object import FlightId, PriceTiers, Schedule
from services.shared.domain import FlightStatus, IsoDateTime


class FlightDetails(TypedDict):
    """フライト詳細の入力データ構造"""

    carrier_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: str | None
    arrival_time: str | None
    first_price: Decimal | None
    business_price: Decimal | None
    economy_price: Decimal | None
    luggage_price: Decimal | None
    weight_price: Decimal | None
    status: str | None


class FlightFactory:
    """フライトエンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - ステータス未指定時は ON_TIME
    """

    def create(self, flight_id: FlightId, details: FlightDetails) -> Flight:
        """フライトエンティティを生成する"""
        schedule = Schedule(
            departure=self._to_datetime(details.get("departure_time")),
            arrival=self._to_datetime(details.get("arrival_time")),
        )
        prices = PriceTiers(
            first=details.get("first_price"),
            business=details.get("business_price"),
            economy=details.get("economy_price"),
            luggage=details.get("luggage_price"),
            weight=details.get("weight_price"),
        )
        return Flight(
            id=flight_id,
            carrier_id=details["carrier_id"],
            departure_airport_id=details["departure_airport_id"],
            arrival_airport_id=details["arrival_airport_id"],
            schedule=schedule,
            prices=prices,
            status=FlightStatus.parse(details.get("status")),
        )

    @staticmethod
    def _to_datetime(value: str | None) -> IsoDateTime | None:
        if value is None or not value.strip():
            return None
        return IsoDateTime.from_string(value)
