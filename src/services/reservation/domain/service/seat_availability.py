from services.flight.domain.value_object import FlightId
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId, Seat


class SeatAvailabilityChecker:
    """座席の空き状況を判定するドメインサービス

    ここでの判定は事前チェックであり、最終的な一意性は
    レポジトリの書き込み時に保証される。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def occupied_seats(
        self, flight_id: FlightId, exclude: ReservationId | None = None
    ) -> list[str]:
        """有効な予約が押さえている座席コード（exclude の予約を除く）"""
        return sorted(
            reservation.seat.code
            for reservation in self._repository.find_active_by_flight(flight_id)
            if reservation.is_active and reservation.id != exclude
        )

    def is_taken(
        self,
        flight_id: FlightId,
        seat_code: str,
        exclude: ReservationId | None = None,
    ) -> bool:
        code = Seat(code=seat_code).code
        return code in self.occupied_seats(flight_id, exclude=exclude)
