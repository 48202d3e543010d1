import secrets
import string

from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import Pnr

PNR_ALPHABET = string.ascii_uppercase + string.digits


class PnrGenerator:
    """未使用の予約番号を発行する"""

    def __init__(
        self, repository: ReservationRepository, max_attempts: int = 10
    ) -> None:
        self._repository = repository
        self._max_attempts = max_attempts

    def generate(self) -> Pnr:
        for _ in range(self._max_attempts):
            pnr = Pnr(
                "".join(secrets.choice(PNR_ALPHABET) for _ in range(Pnr.LENGTH))
            )
            if not self._repository.exists_pnr(pnr):
                return pnr
        raise RuntimeError(
            f"Could not generate a unique PNR after {self._max_attempts} attempts"
        )
