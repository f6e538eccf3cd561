from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.metrics import MetricUnit

from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import ReservationRepository
from services.booking.domain.value_object import ReservationId
from services.shared.domain import OptimisticLockException, ResourceNotFoundException

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルサービス"""

    def __init__(self, repository: ReservationRepository, metrics: Metrics) -> None:
        self._repository = repository
        self._metrics = metrics

    def cancel(self, reservation_id: ReservationId) -> bool:
        """予約をキャンセルする

        既にキャンセル済みの予約は書き込みせずに True を返す（冪等）。
        同時に届いた別のキャンセルに先を越された場合も True を返す。
        """
        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise ResourceNotFoundException(
                f"Booking not found with id: {reservation_id}"
            )

        expected_status = reservation.status
        if not reservation.cancel():
            logger.info(
                "Booking already cancelled", extra={"booking_id": reservation_id.value}
            )
            return True

        try:
            self._repository.update(reservation, expected_status=expected_status)
        except OptimisticLockException:
            if not self._is_cancelled(reservation_id):
                raise
            logger.info(
                "Booking cancelled by a concurrent request",
                extra={"booking_id": reservation_id.value},
            )
            return True

        logger.info("Booking cancelled", extra={"booking_id": reservation_id.value})
        self._metrics.add_metric(
            name="BookingCancelled", unit=MetricUnit.Count, value=1
        )
        return True

    def _is_cancelled(self, reservation_id: ReservationId) -> bool:
        current = self._repository.find_by_id(reservation_id)
        return current is not None and current.status == BookingStatus.CANCELLED
