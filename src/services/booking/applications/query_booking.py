from services.booking.domain.entity import Reservation
from services.booking.domain.repository import ReservationRepository
from services.booking.domain.value_object import Pnr, ReservationId
from services.shared.domain import ResourceNotFoundException


class BookingQueryService:
    """予約の参照系サービス（書き込みは行わない）"""

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def get(self, reservation_id: ReservationId) -> Reservation:
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(
                f"Booking not found with id: {reservation_id}"
            )
        return reservation

    def validate(self, reservation_id: ReservationId) -> bool:
        """予約が存在し、かつ有効（BOOKED）か"""
        reservation = self._repository.find_by_id(reservation_id)
        return reservation is not None and reservation.is_active

    def retrieve_pnr(self, reservation_id: ReservationId) -> Pnr:
        return self.get(reservation_id).pnr

    def find_by_pnr(self, pnr: str) -> Reservation:
        """PNR で検索する（大文字・小文字は区別しない）"""
        try:
            normalized = Pnr.parse(pnr)
        except ValueError as e:
            raise ResourceNotFoundException(
                f"Booking not found with PNR: {pnr}"
            ) from e
        reservation = self._repository.find_by_pnr(normalized)
        if reservation is None:
            raise ResourceNotFoundException(f"Booking not found with PNR: {pnr}")
        return reservation

    def list_by_passenger(self, passenger_id: int) -> list[Reservation]:
        return self._repository.find_by_passenger(passenger_id)
