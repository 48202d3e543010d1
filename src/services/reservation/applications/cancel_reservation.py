from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import OptimisticLockException


class CancelReservationService:
    """予約キャンセルユースケース

    存在しない予約・キャンセル済みの予約に対しては何もしない。
    同時に別のキャンセルが先に書き込んだ場合も、その結果を返す。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def cancel(self, reservation_id: str) -> Reservation | None:
        id = ReservationId(value=reservation_id)
        reservation = self._repository.find_by_id(id)
        if reservation is None or not reservation.is_active:
            return reservation
        reservation.cancel()
        try:
            self._repository.cancel(
                reservation, expected_status=ReservationStatus.ACTIVE
            )
        except OptimisticLockException:
            current = self._repository.find_by_id(id)
            if current is not None and not current.is_active:
                return current
            raise
        return reservation
