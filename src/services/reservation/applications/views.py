from dataclasses import dataclass, field

from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.reservation.domain.entity import Reservation
from services.shared.domain import Money


@dataclass(frozen=True)
class ReservationView:
    """フライト情報を結合した予約"""

    reservation: Reservation
    flight: Flight | None


@dataclass(frozen=True)
class BookingForm:
    """予約画面の表示内容"""

    flight: Flight
    occupied_seats: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EditForm:
    """予約変更画面の表示内容（自身の座席は空席扱い）"""

    reservation: Reservation
    flight: Flight
    occupied_seats: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateResult:
    reservation: Reservation
    amount_due: Money


@dataclass(frozen=True)
class UserReservations:
    """管理者向け: 指定ユーザーの予約一覧"""

    title: str
    user_id: str
    reservations: list[ReservationView]


def attach_flights(
    reservations: list[Reservation], flight_repository: FlightRepository
) -> list[ReservationView]:
    """予約ごとにフライトを結合する（同じフライトは1回だけ取得）"""
    flights: dict[str, Flight | None] = {}
    views = []
    for reservation in reservations:
        key = str(reservation.flight_id)
        if key not in flights:
            flights[key] = flight_repository.find_by_id(reservation.flight_id)
        views.append(ReservationView(reservation=reservation, flight=flights[key]))
    return views
