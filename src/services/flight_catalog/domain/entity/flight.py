from __future__ import annotations

from datetime import date
from decimal import Decimal

from services.flight_catalog.domain.value_object import (
    FlightId,
    PriceTiers,
    RouteSlot,
    Schedule,
)
from services.shared.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    FlightStatus,
)


class Flight(AggregateRoot[FlightId]):
    """フライト（カタログの集約ルート）"""

    def __init__(
        self,
        id: FlightId,
        carrier_id: int,
        departure_airport_id: int,
        arrival_airport_id: int,
        schedule: Schedule,
        prices: PriceTiers,
        status: FlightStatus = FlightStatus.ON_TIME,
    ) -> None:
        super().__init__(id)

        self._carrier_id = carrier_id
        self._departure_airport_id = departure_airport_id
        self._arrival_airport_id = arrival_airport_id
        self._schedule = schedule
        self._prices = prices
        self._status = status

        self._validate_route()

    def _validate_route(self) -> None:
        for name, value in (
            ("carrier_id", self._carrier_id),
            ("departure_airport_id", self._departure_airport_id),
            ("arrival_airport_id", self._arrival_airport_id),
        ):
            if value <= 0:
                raise ValueError(f"{name} must be positive: {value}")

    @property
    def carrier_id(self) -> int:
        return self._carrier_id

    @property
    def departure_airport_id(self) -> int:
        return self._departure_airport_id

    @property
    def arrival_airport_id(self) -> int:
        return self._arrival_airport_id

    @property
    def schedule(self) -> Schedule:
        return self._schedule

    @property
    def prices(self) -> PriceTiers:
        return self._prices

    @property
    def status(self) -> FlightStatus:
        return self._status

    @property
    def departure_date(self) -> date | None:
        return self._schedule.departure_date

    @property
    def route_slot(self) -> RouteSlot | None:
        """路線スロット。出発時刻が未定のフライトはスロットを持たない"""
        departure_date = self._schedule.departure_date
        if departure_date is None:
            return None
        return RouteSlot(
            carrier_id=self._carrier_id,
            departure_airport_id=self._departure_airport_id,
            arrival_airport_id=self._arrival_airport_id,
            departure_date=departure_date,
        )

    @property
    def min_price(self) -> Decimal:
        return self._prices.min_price

    @property
    def duration_minutes(self) -> int | None:
        return self._schedule.duration_minutes

    @property
    def status_color(self) -> str:
        return self._status.color

    def change_status(self, target: FlightStatus) -> None:
        """ステータスを遷移させる"""
        if not self._status.can_transition_to(target):
            raise BusinessRuleViolationException(
                f"Cannot change flight {self.id} status "
                f"from {self._status.value} to {target.value}"
            )
        self._status = target

    def revise(self, revision: Flight) -> None:
        """運航情報を差し替える（ステータスは change_status で別途遷移させる）"""
        self._carrier_id = revision.carrier_id
        self._departure_airport_id = revision.departure_airport_id
        self._arrival_airport_id = revision.arrival_airport_id
        self._schedule = revision.schedule
        self._prices = revision.prices
