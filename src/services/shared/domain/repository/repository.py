from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - ID はストア側で採番する（自動インクリメントの整数）
    """

    @abstractmethod
    def next_id(self) -> ID:
        """新しい集約 ID を採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError
