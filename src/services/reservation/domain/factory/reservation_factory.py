from datetime import datetime
from decimal import Decimal
from typing import NotRequired, TypedDict

from services.flight.domain.entity import Flight
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.service.fare_policy import FarePolicy
from services.reservation.domain.value_object import (
    Baggage,
    Meal,
    Passenger,
    Pnr,
    ReservationId,
)
from services.shared.domain import IsoDateTime


class ReservationDetails(TypedDict):
    """予約作成の入力データ構造"""

    first_name: str
    last_name: str
    email: str
    passport: str
    seat: str
    meal_label: NotRequired[str | None]
    meal_price: NotRequired[Decimal | None]
    baggage: NotRequired[object]


class ReservationFactory:
    """予約エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 運賃はフライト価格のスナップショット
    - 初期状態は ACTIVE
    """

    def __init__(self, fare_policy: FarePolicy) -> None:
        self._fare_policy = fare_policy

    def create(
        self,
        flight: Flight,
        pnr: Pnr,
        details: ReservationDetails,
        user_id: str | None,
        created_at: datetime,
    ) -> Reservation:
        currency = flight.price.currency
        baggage = Baggage.parse(details.get("baggage"))

        return Reservation(
            id=ReservationId.generate(),
            pnr=pnr,
            flight_id=flight.id,
            user_id=user_id,
            passenger=Passenger(
                first_name=details["first_name"],
                last_name=details["last_name"],
                email=details["email"],
                passport=details["passport"],
            ),
            seat=self._fare_policy.seat_for(details["seat"]),
            meal=Meal.from_option(
                details.get("meal_label"), details.get("meal_price"), currency
            ),
            baggage=baggage,
            base_fare=flight.price,
            baggage_surcharge=self._fare_policy.baggage_surcharge(baggage, currency),
            created_at=IsoDateTime(created_at),
            status=ReservationStatus.ACTIVE,
        )
