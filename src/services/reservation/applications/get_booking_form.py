from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightNumber
from services.reservation.applications.views import BookingForm
from services.reservation.domain.exception import FlightAlreadyDepartedException
from services.reservation.domain.service import SeatAvailabilityChecker
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.clock import Clock, utc_now

BOOKING_CLOSED_MESSAGE = (
    "Booking is closed: This flight has already departed "
    "or is scheduled for a past date."
)


class GetBookingFormService:
    """予約画面の表示内容（フライト + 埋まっている座席）を組み立てる"""

    def __init__(
        self,
        flight_repository: FlightRepository,
        seat_checker: SeatAvailabilityChecker,
        clock: Clock = utc_now,
    ) -> None:
        self._flight_repository = flight_repository
        self._seat_checker = seat_checker
        self._clock = clock

    def get(self, flight_number: str) -> BookingForm:
        try:
            number = FlightNumber(value=flight_number)
        except ValueError:
            raise ResourceNotFoundException("Flight not found")

        flight = self._flight_repository.find_by_number(number)
        if flight is None:
            raise ResourceNotFoundException("Flight not found")
        if flight.has_departed(self._clock()):
            raise FlightAlreadyDepartedException(BOOKING_CLOSED_MESSAGE)

        return BookingForm(
            flight=flight,
            occupied_seats=self._seat_checker.occupied_seats(flight.id),
        )
