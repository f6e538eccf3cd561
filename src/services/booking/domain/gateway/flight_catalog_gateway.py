from abc import ABC, abstractmethod

from services.booking.domain.value_object import FlightSnapshot
from services.shared.domain import LookupResult


class FlightCatalogGateway(ABC):
    """フライトカタログへの照会（権威ある依存先）"""

    @abstractmethod
    def lookup(self, flight_id: int) -> LookupResult[FlightSnapshot]:
        """フライトの存在とステータスを照会する

        通信エラー・タイムアウトは例外にせず UNAVAILABLE を返す。
        """
        raise NotImplementedError
