from decimal import Decimal
from typing import TypedDict

from services.booking.domain.entity import Reservation
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import Pnr, ReservationId, Seat
from services.shared.domain import IsoDateTime


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    flight_id: int
    passenger_id: int
    seat_selection: str | None
    luggage_count: int
    luggage_weight: Decimal


class ReservationFactory:
    """予約エンティティのファクトリ

    - 座席指定の解釈（数値以外は未割り当て）
    - ステータスは BOOKED、作成日時は現在時刻（UTC）
    """

    def create(
        self, reservation_id: ReservationId, pnr: Pnr, details: BookingDetails
    ) -> Reservation:
        return Reservation(
            id=reservation_id,
            pnr=pnr,
            flight_id=details["flight_id"],
            passenger_id=details["passenger_id"],
            seat=Seat.from_selection(details.get("seat_selection")),
            luggage_count=details.get("luggage_count", 0),
            luggage_weight=details.get("luggage_weight", Decimal("0")),
            status=BookingStatus.BOOKED,
            created_at=IsoDateTime.now(),
        )
