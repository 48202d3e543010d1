from datetime import datetime

from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId
from services.reservation.domain.entity import Reservation
from services.reservation.domain.exception import (
    FlightAlreadyDepartedException,
    PnrCollisionException,
    SeatAlreadyBookedException,
)
from services.reservation.domain.factory import (
    ReservationDetails,
    ReservationFactory,
)
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.service import (
    PnrGenerator,
    SeatAvailabilityChecker,
)
from services.reservation.domain.value_object import Seat
from services.shared.domain import CallerIdentity
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils.clock import Clock, utc_now


class CreateReservationService:
    """予約作成ユースケース

    フライト存在 → 出発前 → 座席の空き の順に検証してから永続化する。
    書き込み時に PNR が衝突した場合は一度だけ採番し直す。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        reservation_repository: ReservationRepository,
        factory: ReservationFactory,
        seat_checker: SeatAvailabilityChecker,
        pnr_generator: PnrGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self._flight_repository = flight_repository
        self._reservation_repository = reservation_repository
        self._factory = factory
        self._seat_checker = seat_checker
        self._pnr_generator = pnr_generator
        self._clock = clock

    def create(
        self,
        flight_id: str,
        details: ReservationDetails,
        caller: CallerIdentity,
    ) -> Reservation:
        flight = self._flight_repository.find_by_id(FlightId(value=flight_id))
        if flight is None:
            raise ResourceNotFoundException("Flight not found.")

        now = self._clock()
        if flight.has_departed(now):
            raise FlightAlreadyDepartedException()

        seat_code = Seat(code=details["seat"]).code
        if self._seat_checker.is_taken(flight.id, seat_code):
            raise SeatAlreadyBookedException(seat_code)

        try:
            return self._persist(flight, details, caller, now)
        except PnrCollisionException:
            return self._persist(flight, details, caller, now)

    def _persist(
        self,
        flight: Flight,
        details: ReservationDetails,
        caller: CallerIdentity,
        now: datetime,
    ) -> Reservation:
        reservation = self._factory.create(
            flight=flight,
            pnr=self._pnr_generator.generate(),
            details=details,
            user_id=caller.user_id,
            created_at=now,
        )
        self._reservation_repository.save(reservation)
        return reservation
