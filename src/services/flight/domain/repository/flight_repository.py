from abc import ABC, abstractmethod

from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightId, FlightNumber


class FlightRepository(ABC):
    """フライトレポジトリ（読み取り専用）"""

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_number(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索"""
        raise NotImplementedError
