from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクトへの変更は必ず集約ルートを経由する
    - 永続化の単位 = 集約境界
    """
