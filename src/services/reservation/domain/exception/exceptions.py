from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
)


class SeatAlreadyBookedException(DuplicateResourceException):
    """座席が有効な予約によって既に押さえられている場合"""

    def __init__(self, seat_code: str, race_detected: bool = False) -> None:
        self.seat_code = seat_code
        self.race_detected = race_detected
        message = f"Seat {seat_code} is already booked."
        if race_detected:
            message += " A race condition was detected. Please choose another seat."
        super().__init__(message)


class FlightAlreadyDepartedException(BusinessRuleViolationException):
    """出発済みのフライトに対する予約・変更"""

    def __init__(
        self, message: str = "Booking failed: This flight has already departed."
    ) -> None:
        super().__init__(message)


class PnrCollisionException(Exception):
    """書き込み時に PNR が既存の予約と衝突した（サーバー側の採番エラー）"""

    def __init__(self, pnr: object) -> None:
        self.pnr = pnr
        super().__init__(f"PNR already exists: {pnr}")
