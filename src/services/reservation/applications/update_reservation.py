from decimal import Decimal
from typing import NotRequired, TypedDict

from services.flight.domain.repository import FlightRepository
from services.reservation.applications.views import UpdateResult
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import (
    FlightAlreadyDepartedException,
    SeatAlreadyBookedException,
)
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.service import (
    FarePolicy,
    SeatAvailabilityChecker,
)
from services.reservation.domain.value_object import (
    Baggage,
    Meal,
    ReservationId,
    Seat,
)
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from services.shared.utils.clock import Clock, utc_now


class ReservationChanges(TypedDict):
    """予約変更の入力（キーが存在する項目のみ変更する）"""

    seat: NotRequired[str]
    meal_label: NotRequired[str | None]
    meal_price: NotRequired[Decimal | None]
    baggage: NotRequired[object]


class UpdateReservationService:
    """予約変更ユースケース（座席・機内食・手荷物）"""

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        flight_repository: FlightRepository,
        fare_policy: FarePolicy,
        seat_checker: SeatAvailabilityChecker,
        clock: Clock = utc_now,
    ) -> None:
        self._reservation_repository = reservation_repository
        self._flight_repository = flight_repository
        self._fare_policy = fare_policy
        self._seat_checker = seat_checker
        self._clock = clock

    def update(self, reservation_id: str, changes: ReservationChanges) -> UpdateResult:
        """予約を変更し、変更後の予約と追加請求額を返す"""
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
                "Update failed: This flight has already departed."
            )

        before = reservation.bill
        previous_seat = reservation.seat
        currency = before.base_fare.currency

        if changes.get("seat"):
            seat_code = Seat(code=changes["seat"]).code
            if seat_code != previous_seat.code and self._seat_checker.is_taken(
                reservation.flight_id, seat_code, exclude=reservation.id
            ):
                raise SeatAlreadyBookedException(seat_code)
            reservation.change_seat(self._fare_policy.seat_for(seat_code))

        if "meal_label" in changes or "meal_price" in changes:
            reservation.change_meal(
                Meal.from_option(
                    changes.get("meal_label"), changes.get("meal_price"), currency
                )
            )

        if "baggage" in changes:
            baggage = Baggage.parse(changes["baggage"])
            reservation.change_baggage(
                baggage, self._fare_policy.baggage_surcharge(baggage, currency)
            )

        self._reservation_repository.update(
            reservation,
            expected_status=ReservationStatus.ACTIVE,
            previous_seat=previous_seat,
        )
        return UpdateResult(
            reservation=reservation,
            amount_due=reservation.bill.amount_due_since(before),
        )
