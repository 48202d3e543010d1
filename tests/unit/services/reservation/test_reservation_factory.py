from decimal import Decimal

from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import Pnr
from services.shared.domain import Currency, Money

USD = Currency.default()


class TestReservationFactory:
    """ReservationFactory のテスト"""

    def test_create_with_defaults(
        self, reservation_factory, create_flight, reservation_details, now
    ):
        flight = create_flight()

        reservation = reservation_factory.create(
            flight=flight,
            pnr=Pnr("ABC123"),
            details=reservation_details(seat="3a"),
            user_id=None,
            created_at=now,
        )

        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.flight_id == flight.id
        assert reservation.user_id is None
        assert reservation.seat.code == "3A"
        assert reservation.seat.is_premium is True
        assert reservation.meal.label == "None"
        assert reservation.meal.price == Money(Decimal("0"), USD)
        assert reservation.baggage.kg == 0
        assert reservation.bill.base_fare == flight.price
        assert reservation.bill.total == Money(Decimal("100"), USD)

    def test_create_with_meal_and_lenient_baggage(
        self, reservation_factory, create_flight, reservation_details, now
    ):
        reservation = reservation_factory.create(
            flight=create_flight(),
            pnr=Pnr("ABC123"),
            details=reservation_details(
                seat="12C",
                meal_label="Premium Meal",
                meal_price=Decimal("20"),
                baggage="23kg",
            ),
            user_id="user-1",
            created_at=now,
        )

        assert reservation.seat.is_premium is False
        assert reservation.meal.label == "Premium Meal"
        assert reservation.baggage.kg == 23
        assert reservation.bill.total == Money(Decimal("120"), USD)
