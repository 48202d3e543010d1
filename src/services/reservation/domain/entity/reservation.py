from services.flight.domain.value_object import FlightId
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import (
    Baggage,
    Bill,
    Meal,
    Passenger,
    Pnr,
    ReservationId,
    Seat,
)
from services.shared.domain import AggregateRoot, IsoDateTime, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Reservation(AggregateRoot[ReservationId]):
    """フライト予約

    変更できるのは座席・機内食・手荷物のみ。搭乗者情報、フライト、
    予約番号は作成後に変更できない。
    """

    def __init__(
        self,
        id: ReservationId,
        pnr: Pnr,
        flight_id: FlightId,
        user_id: str | None,
        passenger: Passenger,
        seat: Seat,
        meal: Meal,
        baggage: Baggage,
        base_fare: Money,
        baggage_surcharge: Money,
        created_at: IsoDateTime,
        status: ReservationStatus = ReservationStatus.ACTIVE,
    ) -> None:
        super().__init__(id)

        self._pnr = pnr
        self._flight_id = flight_id
        self._user_id = user_id
        self._passenger = passenger
        self._seat = seat
        self._meal = meal
        self._baggage = baggage
        self._base_fare = base_fare
        self._baggage_surcharge = baggage_surcharge
        self._created_at = created_at
        self._status = status

        currencies = {
            base_fare.currency,
            meal.price.currency,
            baggage_surcharge.currency,
        }
        if len(currencies) != 1:
            raise ValueError("Fare, meal and baggage must share one currency")

    @property
    def pnr(self) -> Pnr:
        return self._pnr

    @property
    def flight_id(self) -> FlightId:
        return self._flight_id

    @property
    def user_id(self) -> str | None:
        """予約者のユーザーID（ゲスト予約は None）"""
        return self._user_id

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    @property
    def seat(self) -> Seat:
        return self._seat

    @property
    def meal(self) -> Meal:
        return self._meal

    @property
    def baggage(self) -> Baggage:
        return self._baggage

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == ReservationStatus.ACTIVE

    @property
    def bill(self) -> Bill:
        return Bill(
            base_fare=self._base_fare,
            meal_price=self._meal.price,
            baggage_surcharge=self._baggage_surcharge,
        )

    def change_seat(self, seat: Seat) -> None:
        """座席を変更する"""
        self._ensure_modifiable()
        self._seat = seat

    def change_meal(self, meal: Meal) -> None:
        """機内食を変更する"""
        self._ensure_modifiable()
        self._meal = meal

    def change_baggage(self, baggage: Baggage, surcharge: Money) -> None:
        """手荷物と手荷物料金を変更する"""
        self._ensure_modifiable()
        self._baggage = baggage
        self._baggage_surcharge = surcharge

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == ReservationStatus.CANCELLED:
            return
        self._status = ReservationStatus.CANCELLED

    def _ensure_modifiable(self) -> None:
        if self._status == ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException(
                "Cannot modify a cancelled reservation"
            )
