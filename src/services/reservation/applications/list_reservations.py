from services.flight.domain.repository import FlightRepository
from services.reservation.applications.views import (
    ReservationView,
    UserReservations,
    attach_flights,
)
from services.reservation.domain.repository import ReservationRepository
from services.shared.domain import CallerIdentity
from services.shared.domain.exception import (
    AuthenticationException,
    AuthorizationException,
    ResourceNotFoundException,
)
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import UserId


class ListReservationsService:
    """予約一覧ユースケース

    - 一般ユーザー: 自分の予約のみ
    - 管理者: 全予約、または指定ユーザーの予約
    """

    def __init__(
        self,
        reservation_repository: ReservationRepository,
        flight_repository: FlightRepository,
        user_repository: UserRepository,
    ) -> None:
        self._reservation_repository = reservation_repository
        self._flight_repository = flight_repository
        self._user_repository = user_repository

    def list_for_caller(self, caller: CallerIdentity) -> list[ReservationView]:
        if not caller.is_authenticated:
            raise AuthenticationException("Authentication required.")

        if caller.is_admin:
            reservations = self._reservation_repository.find_all()
        else:
            reservations = self._reservation_repository.find_by_user(caller.user_id)
        return attach_flights(reservations, self._flight_repository)

    def list_for_user(self, caller: CallerIdentity, user_id: str) -> UserReservations:
        """管理者向け: 指定ユーザーの予約一覧"""
        if not caller.is_authenticated:
            raise AuthenticationException("Authentication required.")
        if not caller.is_admin:
            raise AuthorizationException("Admin access required.")

        user = self._user_repository.find_by_id(UserId(value=user_id))
        if user is None:
            raise ResourceNotFoundException("User not found")

        reservations = self._reservation_repository.find_by_user(str(user.id))
        return UserReservations(
            title=f"{user.full_name}'s Reservations",
            user_id=str(user.id),
            reservations=attach_flights(reservations, self._flight_repository),
        )
