from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 集約の状態変更は必ず集約ルートのメソッドを経由する
    - 永続化の単位 = 集約境界
    """

    pass
