import copy
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.flight.domain.value_object import FlightId
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import (
    PnrCollisionException,
    SeatAlreadyBookedException,
)
from services.reservation.domain.factory import ReservationFactory
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.service import (
    FarePolicy,
    PnrGenerator,
    SeatAvailabilityChecker,
)
from services.reservation.domain.value_object import (
    Baggage,
    Meal,
    Passenger,
    Pnr,
    ReservationId,
    Seat,
)
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)

USD = Currency.default()


class InMemoryReservationRepository(ReservationRepository):
    """テスト用のインメモリ実装（DynamoDB 実装と同じ一意性を保証する）"""

    def __init__(self) -> None:
        self._items: dict[ReservationId, Reservation] = {}

    def save(self, reservation: Reservation) -> None:
        if reservation.id in self._items:
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            )
        if self.exists_pnr(reservation.pnr):
            raise PnrCollisionException(reservation.pnr)
        self._ensure_seat_free(reservation)
        self._items[reservation.id] = copy.deepcopy(reservation)

    def update(self, reservation, expected_status, previous_seat=None) -> None:
        self._ensure_status(reservation, expected_status)
        self._ensure_seat_free(reservation)
        self._items[reservation.id] = copy.deepcopy(reservation)

    def cancel(self, reservation, expected_status) -> None:
        self._ensure_status(reservation, expected_status)
        self._items[reservation.id] = copy.deepcopy(reservation)

    def find_by_id(self, reservation_id):
        stored = self._items.get(reservation_id)
        return copy.deepcopy(stored) if stored else None

    def find_active_by_flight(self, flight_id):
        return [
            copy.deepcopy(r)
            for r in self._items.values()
            if r.flight_id == flight_id and r.is_active
        ]

    def find_by_user(self, user_id):
        return [copy.deepcopy(r) for r in self._items.values() if r.user_id == user_id]

    def find_all(self):
        return [copy.deepcopy(r) for r in self._items.values()]

    def exists_pnr(self, pnr) -> bool:
        return any(r.pnr == pnr for r in self._items.values())

    def active_count(self, flight_id: FlightId, seat_code: str) -> int:
        return sum(
            1
            for r in self._items.values()
            if r.flight_id == flight_id and r.seat.code == seat_code and r.is_active
        )

    def _ensure_status(self, reservation, expected_status) -> None:
        stored = self._items.get(reservation.id)
        if stored is None or stored.status != expected_status:
            raise OptimisticLockException("Reservation status conflict")

    def _ensure_seat_free(self, reservation) -> None:
        if not reservation.is_active:
            return
        for other in self._items.values():
            if (
                other.id != reservation.id
                and other.is_active
                and other.flight_id == reservation.flight_id
                and other.seat.code == reservation.seat.code
            ):
                raise SeatAlreadyBookedException(
                    reservation.seat.code, race_detected=True
                )


@pytest.fixture
def reservation_repository():
    return InMemoryReservationRepository()


@pytest.fixture
def fare_policy():
    return FarePolicy(premium_rows=frozenset({1, 2, 3, 4}))


@pytest.fixture
def seat_checker(reservation_repository):
    return SeatAvailabilityChecker(reservation_repository)


@pytest.fixture
def pnr_generator(reservation_repository):
    return PnrGenerator(reservation_repository)


@pytest.fixture
def reservation_factory(fare_policy):
    return ReservationFactory(fare_policy)


@pytest.fixture
def flight_repository(create_flight):
    """F1（出発前）を返すフライトレポジトリのモック"""
    repository = MagicMock()
    flight = create_flight()
    repository.find_by_id.side_effect = lambda flight_id: (
        flight if flight_id == flight.id else None
    )
    repository.find_by_number.side_effect = lambda number: (
        flight if number == flight.flight_number else None
    )
    return repository


@pytest.fixture
def create_reservation(now):
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        reservation_id: str = "R1",
        pnr: str = "ABC123",
        flight_id: str = "F1",
        user_id: str | None = "user-1",
        seat: str = "12C",
        is_premium: bool = False,
        meal_label: str = "None",
        meal_price: Decimal = Decimal("0"),
        baggage_kg: int = 0,
        base_fare: Decimal = Decimal("100"),
        baggage_surcharge: Decimal = Decimal("0"),
        status: ReservationStatus = ReservationStatus.ACTIVE,
    ) -> Reservation:
        usd = USD
        return Reservation(
            id=ReservationId(value=reservation_id),
            pnr=Pnr(pnr),
            flight_id=FlightId(value=flight_id),
            user_id=user_id,
            passenger=Passenger(
                first_name="Ada",
                last_name="Lovelace",
                email="ada@example.com",
                passport="X1234567",
            ),
            seat=Seat(code=seat, is_premium=is_premium),
            meal=Meal(label=meal_label, price=Money(meal_price, usd)),
            baggage=Baggage(kg=baggage_kg),
            base_fare=Money(base_fare, usd),
            baggage_surcharge=Money(baggage_surcharge, usd),
            created_at=IsoDateTime(now),
            status=status,
        )

    return _factory


@pytest.fixture
def reservation_details():
    """予約作成の入力（ReservationDetails）を生成する Factory fixture"""

    def _factory(seat: str = "3A", **overrides):
        details = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "passport": "X1234567",
            "seat": seat,
        }
        details.update(overrides)
        return details

    return _factory
