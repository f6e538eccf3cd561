from decimal import Decimal

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import Pnr, ReservationId, Seat
from services.shared.domain import AggregateRoot, IsoDateTime


class Reservation(AggregateRoot[ReservationId]):
    """予約（予約サービスの集約ルート）

    PNR は発行後に変更しない。予約は物理削除せず、キャンセル済みとして残す。
    """

    def __init__(
        self,
        id: ReservationId,
        pnr: Pnr,
        flight_id: int,
        passenger_id: int,
        seat: Seat,
        luggage_count: int = 0,
        luggage_weight: Decimal = Decimal("0"),
        status: BookingStatus = BookingStatus.BOOKED,
        created_at: IsoDateTime | None = None,
    ) -> None:
        super().__init__(id)

        self._pnr = pnr
        self._flight_id = flight_id
        self._passenger_id = passenger_id
        self._seat = seat
        self._luggage_count = luggage_count
        self._luggage_weight = luggage_weight
        self._status = status
        self._created_at = created_at or IsoDateTime.now()

        self._validate_luggage()

    def _validate_luggage(self) -> None:
        if self._luggage_count < 0:
            raise ValueError(
                f"luggage_count must not be negative: {self._luggage_count}"
            )
        if self._luggage_weight < 0:
            raise ValueError(
                f"luggage_weight must not be negative: {self._luggage_weight}"
            )

    @property
    def pnr(self) -> Pnr:
        return self._pnr

    @property
    def flight_id(self) -> int:
        return self._flight_id

    @property
    def passenger_id(self) -> int:
        return self._passenger_id

    @property
    def seat(self) -> Seat:
        return self._seat

    @property
    def luggage_count(self) -> int:
        return self._luggage_count

    @property
    def luggage_weight(self) -> Decimal:
        return self._luggage_weight

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self._status == BookingStatus.BOOKED

    def cancel(self) -> bool:
        """予約をキャンセルする

        既にキャンセル済みなら何もしない。状態が変わった場合のみ True を返す。
        """
        if self._status == BookingStatus.CANCELLED:
            return False
        self._status = BookingStatus.CANCELLED
        return True

    def reassign_pnr(self, pnr: Pnr) -> None:
        """PNR を振り直す（永続化前の衝突時のみ使用する）"""
        self._pnr = pnr
