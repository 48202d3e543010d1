from services.flight.domain.repository import FlightRepository
from services.reservation.applications.views import EditForm
from services.reservation.domain.exception import FlightAlreadyDepartedException
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.service import SeatAvailabilityChecker
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from services.shared.utils.clock import Clock, utc_now


class GetEditFormService:
    """予約変更画面の表示内容を組み立てる"""

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        flight_repository: FlightRepository,
        seat_checker: SeatAvailabilityChecker,
        clock: Clock = utc_now,
    ) -> None:
        self._reservation_repository = reservation_repository
        self._flight_repository = flight_repository
        self._seat_checker = seat_checker
        self._clock = clock

    def get(self, reservation_id: str) -> EditForm:
        reservation = self._reservation_repository.find_by_id(
            ReservationId(value=reservation_id)
        )
        if reservation is None:
            raise ResourceNotFoundException("Reservation not found")
        if not reservation.is_active:
            raise BusinessRuleViolationException(
                "Cannot modify a cancelled reservation"
            )

        flight = self._flight_repository.find_by_id(reservation.flight_id)
        if flight is None:
            raise ResourceNotFoundException("Flight not found.")
        if flight.has_departed(self._clock()):
            raise FlightAlreadyDepartedException(
                "Editing is closed: This flight has already departed."
            )

        return EditForm(
            reservation=reservation,
            flight=flight,
            occupied_seats=self._seat_checker.occupied_seats(
                flight.id, exclude=reservation.id
            ),
        )
