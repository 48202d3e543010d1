from abc import abstractmethod

from services.flight.domain.value_object import FlightId
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.value_object import Pnr, ReservationId, Seat
from services.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """予約レポジトリ

    (フライト, 座席コード) ごとに有効な予約が高々1件であることを
    永続化層でも保証する。保証に違反する書き込みは
    SeatAlreadyBookedException を送出する。
    """

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """新規予約を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus,
        previous_seat: Seat | None = None,
    ) -> None:
        """予約を更新する（previous_seat 指定時は座席の確保を付け替える）"""
        raise NotImplementedError

    @abstractmethod
    def cancel(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> None:
        """キャンセル状態を保存し、座席を解放する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_active_by_flight(self, flight_id: FlightId) -> list[Reservation]:
        """フライトの有効な予約を検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user(self, user_id: str) -> list[Reservation]:
        """ユーザーの予約を検索（キャンセル済みを含む）"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全予約を取得"""
        raise NotImplementedError

    @abstractmethod
    def exists_pnr(self, pnr: Pnr) -> bool:
        """予約番号が発行済みか"""
        raise NotImplementedError
