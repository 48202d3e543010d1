from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.reservation.applications.create_reservation import (
    CreateReservationService,
)
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import (
    FlightAlreadyDepartedException,
    PnrCollisionException,
    SeatAlreadyBookedException,
)
from services.shared.domain import Currency, Money
from services.shared.domain.exception import ResourceNotFoundException

USD = Currency.default()


@pytest.fixture
def service(
    flight_repository,
    reservation_repository,
    reservation_factory,
    seat_checker,
    pnr_generator,
    clock,
):
    return CreateReservationService(
        flight_repository=flight_repository,
        reservation_repository=reservation_repository,
        factory=reservation_factory,
        seat_checker=seat_checker,
        pnr_generator=pnr_generator,
        clock=clock,
    )


class TestCreateReservationService:
    """CreateReservationService のテスト"""

    def test_create_saves_reservation(
        self, service, reservation_repository, reservation_details, member
    ):
        reservation = service.create("F1", reservation_details(seat="3A"), member)

        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.user_id == "user-1"
        assert reservation.seat.is_premium is True
        assert reservation.bill.base_fare == Money(Decimal("100"), USD)
        assert reservation_repository.find_by_id(reservation.id) is not None

    def test_guest_reservation_has_no_owner(self, service, reservation_details, guest):
        reservation = service.create("F1", reservation_details(), guest)
        assert reservation.user_id is None

    def test_unknown_flight_raises_not_found(self, service, reservation_details, guest):
        with pytest.raises(ResourceNotFoundException, match="Flight not found."):
            service.create("F404", reservation_details(), guest)

    def test_departed_flight_is_rejected(
        self,
        reservation_repository,
        reservation_factory,
        seat_checker,
        pnr_generator,
        create_flight,
        reservation_details,
        guest,
        now,
    ):
        flight_repository = MagicMock()
        flight_repository.find_by_id.return_value = create_flight(
            schedule=now - timedelta(hours=1)
        )
        service = CreateReservationService(
            flight_repository=flight_repository,
            reservation_repository=reservation_repository,
            factory=reservation_factory,
            seat_checker=seat_checker,
            pnr_generator=pnr_generator,
            clock=lambda: now,
        )

        with pytest.raises(FlightAlreadyDepartedException, match="already departed"):
            service.create("F1", reservation_details(), guest)
        assert reservation_repository.find_all() == []

    def test_booked_seat_is_rejected(self, service, reservation_details, guest):
        service.create("F1", reservation_details(seat="3A"), guest)

        with pytest.raises(SeatAlreadyBookedException) as exc_info:
            service.create("F1", reservation_details(seat="3a"), guest)
        assert str(exc_info.value) == "Seat 3A is already booked."

    def test_race_at_persist_time_surfaces_as_seat_conflict(
        self,
        flight_repository,
        reservation_factory,
        pnr_generator,
        reservation_details,
        guest,
        clock,
    ):
        """事前チェックをすり抜けた場合もレポジトリの一意性違反で座席競合になる"""
        reservation_repository = MagicMock()
        reservation_repository.exists_pnr.return_value = False
        reservation_repository.save.side_effect = SeatAlreadyBookedException(
            "3A", race_detected=True
        )
        seat_checker = MagicMock()
        seat_checker.is_taken.return_value = False
        service = CreateReservationService(
            flight_repository=flight_repository,
            reservation_repository=reservation_repository,
            factory=reservation_factory,
            seat_checker=seat_checker,
            pnr_generator=pnr_generator,
            clock=clock,
        )

        with pytest.raises(SeatAlreadyBookedException, match="race condition"):
            service.create("F1", reservation_details(seat="3A"), guest)

    def test_pnrs_are_unique(self, service, reservation_repository, guest):
        seats = ["1A", "1B", "1C", "2A", "2B", "2C", "5A", "5B"]
        for seat in seats:
            service.create(
                "F1",
                {
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "passport": "X1",
                    "seat": seat,
                },
                guest,
            )
        pnrs = {r.pnr for r in reservation_repository.find_all()}
        assert len(pnrs) == len(seats)


class TestPnrCollisionAtWriteTime:
    @pytest.fixture
    def saving_repository(self):
        repository = MagicMock()
        repository.exists_pnr.return_value = False
        return repository

    @pytest.fixture
    def collision_service(
        self,
        flight_repository,
        saving_repository,
        reservation_factory,
        seat_checker,
        pnr_generator,
        clock,
    ):
        return CreateReservationService(
            flight_repository=flight_repository,
            reservation_repository=saving_repository,
            factory=reservation_factory,
            seat_checker=seat_checker,
            pnr_generator=pnr_generator,
            clock=clock,
        )

    def test_collision_is_retried_with_new_pnr(
        self, collision_service, saving_repository, reservation_details, guest
    ):
        saving_repository.save.side_effect = [PnrCollisionException("ABC123"), None]

        reservation = collision_service.create("F1", reservation_details(), guest)

        assert saving_repository.save.call_count == 2
        first, second = (c.args[0] for c in saving_repository.save.call_args_list)
        assert first.pnr != second.pnr
        assert reservation is second

    def test_second_collision_propagates(
        self, collision_service, saving_repository, reservation_details, guest
    ):
        saving_repository.save.side_effect = PnrCollisionException("ABC123")

        with pytest.raises(PnrCollisionException):
            collision_service.create("F1", reservation_details(), guest)
        assert saving_repository.save.call_count == 2
