from abc import ABC, abstractmethod

from services.shared.domain import LookupResult


class PassengerDirectoryGateway(ABC):
    """乗客ディレクトリへの照会（縮退可能な依存先）"""

    @abstractmethod
    def exists(self, passenger_id: int) -> LookupResult[bool]:
        """乗客の存在を照会する

        通信エラー・タイムアウトは例外にせず UNAVAILABLE を返す。
        """
        raise NotImplementedError
