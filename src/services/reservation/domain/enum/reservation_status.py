from enum import Enum


class ReservationStatus(str, Enum):
    """予約ステータス

    ACTIVE -> CANCELLED の一方向のみ遷移する。
    """

    ACTIVE = "ACTIVE"
    CANCELLED = "CANCELLED"
