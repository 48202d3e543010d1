from __future__ import annotations

from services.flight.domain.entity import Flight
from services.reservation.applications.views import (
    BookingForm,
    EditForm,
    ReservationView,
    UpdateResult,
    UserReservations,
)
from services.reservation.domain.entity import Reservation
from services.shared.utils import CamelModel


class SeatData(CamelModel):
    code: str
    is_premium: bool


class MealData(CamelModel):
    label: str
    price: str


class BaggageData(CamelModel):
    kg: int


class BillData(CamelModel):
    base_fare: str
    meal_price: str
    baggage_surcharge: str
    total: str
    currency: str


class ReservationData(CamelModel):
    """予約データのレスポンスモデル"""

    id: str
    pnr: str
    flight_id: str
    user_id: str | None
    first_name: str
    last_name: str
    email: str
    passport: str
    seat: SeatData
    meal: MealData
    baggage: BaggageData
    bill: BillData
    status: str
    created_at: str


class FlightData(CamelModel):
    """フライトデータのレスポンスモデル"""

    id: str
    flight_number: str
    schedule: str
    price: str
    currency: str


class ReservationDetailData(ReservationData):
    flight: FlightData | None = None


class SuccessResponse(CamelModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: dict | list


def reservation_data(reservation: Reservation) -> ReservationData:
    bill = reservation.bill
    return ReservationData(
        id=str(reservation.id),
        pnr=str(reservation.pnr),
        flight_id=str(reservation.flight_id),
        user_id=reservation.user_id,
        first_name=reservation.passenger.first_name,
        last_name=reservation.passenger.last_name,
        email=reservation.passenger.email,
        passport=reservation.passenger.passport,
        seat=SeatData(
            code=reservation.seat.code, is_premium=reservation.seat.is_premium
        ),
        meal=MealData(
            label=reservation.meal.label, price=str(reservation.meal.price.amount)
        ),
        baggage=BaggageData(kg=reservation.baggage.kg),
        bill=BillData(
            base_fare=str(bill.base_fare.amount),
            meal_price=str(bill.meal_price.amount),
            baggage_surcharge=str(bill.baggage_surcharge.amount),
            total=str(bill.total.amount),
            currency=str(bill.base_fare.currency),
        ),
        status=reservation.status.value,
        created_at=str(reservation.created_at),
    )


def flight_data(flight: Flight) -> FlightData:
    return FlightData(
        id=str(flight.id),
        flight_number=str(flight.flight_number),
        schedule=str(flight.schedule),
        price=str(flight.price.amount),
        currency=str(flight.price.currency),
    )


def detail_data(view: ReservationView) -> ReservationDetailData:
    return ReservationDetailData(
        **reservation_data(view.reservation).model_dump(),
        flight=flight_data(view.flight) if view.flight else None,
    )


def _success(data: dict | list) -> dict:
    return SuccessResponse(data=data).to_json_dict()


def to_response(reservation: Reservation) -> dict:
    """Reservation エンティティをレスポンス辞書に変換する"""
    return _success(reservation_data(reservation).to_json_dict())


def to_update_response(result: UpdateResult) -> dict:
    return _success(
        {
            "updatedReservation": reservation_data(result.reservation).to_json_dict(),
            "amountDue": str(result.amount_due.amount),
        }
    )


def to_detail_response(view: ReservationView) -> dict:
    return _success(detail_data(view).to_json_dict())


def to_list_response(views: list[ReservationView]) -> dict:
    return _success([detail_data(view).to_json_dict() for view in views])


def to_booking_form_response(form: BookingForm) -> dict:
    return _success(
        {
            "flight": flight_data(form.flight).to_json_dict(),
            "occupiedSeats": form.occupied_seats,
        }
    )


def to_edit_form_response(form: EditForm) -> dict:
    return _success(
        {
            "reservation": reservation_data(form.reservation).to_json_dict(),
            "flight": flight_data(form.flight).to_json_dict(),
            "occupiedSeats": form.occupied_seats,
        }
    )


def to_user_reservations_response(result: UserReservations) -> dict:
    return _success(
        {
            "title": result.title,
            "userId": result.user_id,
            "reservations": [
                detail_data(view).to_json_dict() for view in result.reservations
            ],
        }
    )
