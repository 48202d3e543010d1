from services.flight.domain.repository import FlightRepository
from services.reservation.applications.views import ReservationView
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import ResourceNotFoundException


class GetReservationService:
    """予約詳細取得ユースケース"""

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        flight_repository: FlightRepository,
    ) -> None:
        self._reservation_repository = reservation_repository
        self._flight_repository = flight_repository

    def get(self, reservation_id: str) -> ReservationView:
        reservation = self._reservation_repository.find_by_id(
            ReservationId(value=reservation_id)
        )
        if reservation is None:
            raise ResourceNotFoundException("Reservation not found")
        return ReservationView(
            reservation=reservation,
            flight=self._flight_repository.find_by_id(reservation.flight_id),
        )
