from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from services.shared.domain.exception import ResourceNotFoundException

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """集約を永続化する Repository の基底クラス"""

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を書き込む（既存の場合は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        raise NotImplementedError

    def get(self, id: ID, not_found_message: str) -> T:
        """ID で取得する。存在しない場合は ResourceNotFoundException"""
        aggregate = self.find_by_id(id)
        if aggregate is None:
            raise ResourceNotFoundException(not_found_message)
        return aggregate
