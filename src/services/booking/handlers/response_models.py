from pydantic import BaseModel

from services.booking.domain.entity import Reservation


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    id: int
    pnr: str
    status: str
    flight_id: int
    passenger_id: int
    seat_id: int
    luggage_count: int
    weight: str
    created_at: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData


class ReservationListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    count: int
    data: list[ReservationData]


def to_reservation_data(reservation: Reservation) -> ReservationData:
    """Reservation エンティティをレスポンスモデルに変換する"""
    return ReservationData(
        id=reservation.id.value,
        pnr=str(reservation.pnr),
        status=reservation.status.value,
        flight_id=reservation.flight_id,
        passenger_id=reservation.passenger_id,
        seat_id=reservation.seat.value,
        luggage_count=reservation.luggage_count,
        weight=str(reservation.luggage_weight),
        created_at=str(reservation.created_at),
    )


def to_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_reservation_data(reservation)).model_dump()


def to_list_response(reservations: list[Reservation]) -> dict:
    return ReservationListResponse(
        count=len(reservations),
        data=[to_reservation_data(reservation) for reservation in reservations],
    ).model_dump()
