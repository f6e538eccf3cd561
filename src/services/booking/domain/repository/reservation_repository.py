from abc import abstractmethod

from services.booking.domain.entity import Reservation
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import Pnr, ReservationId
from services.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約レポジトリ"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """新規予約を永続化する

        PNR が既存の予約と重複する場合は DuplicateResourceException
        """
        raise NotImplementedError

    @abstractmethod
    def update(
        self, reservation: Reservation, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する

        expected_status と現在のステータスが異なる場合は OptimisticLockException
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_pnr(self, pnr: Pnr) -> Reservation | None:
        """PNR で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_passenger(self, passenger_id: int) -> list[Reservation]:
        """乗客IDで検索（予約ID順）"""
        raise NotImplementedError
