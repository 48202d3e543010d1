from datetime import datetime

from services.flight.domain.value_object import FlightId, FlightNumber
from services.shared.domain import Entity, IsoDateTime, Money


class Flight(Entity[FlightId]):
    """フライト（予約サービスからは参照のみ）"""

    def __init__(
        self,
        id: FlightId,
        flight_number: FlightNumber,
        schedule: IsoDateTime,
        price: Money,
    ) -> None:
        super().__init__(id)
        self._flight_number = flight_number
        self._schedule = schedule
        self._price = price

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def schedule(self) -> IsoDateTime:
        """出発予定日時"""
        return self._schedule

    @property
    def price(self) -> Money:
        """基本運賃"""
        return self._price

    def has_departed(self, now: datetime) -> bool:
        """now の時点で出発予定日時を過ぎているか"""
        return self._schedule.has_passed(now)
