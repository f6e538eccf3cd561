from abc import abstractmethod
from datetime import date

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.value_object import FlightId
from services.shared.domain import FlightStatus, Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリのインターフェース

    一覧系の検索結果は ID の昇順（登録順）で返す。
    """

    @abstractmethod
    def next_id(self) -> FlightId:
        """フライトIDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """新規フライトを保存する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, flight: Flight) -> None:
        """既存フライトを更新する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, flight_id: FlightId) -> None:
        """フライトを削除する（存在しなければ ResourceNotFoundException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """全フライトを取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_route(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_date: date | None = None,
    ) -> list[Flight]:
        """路線（と出発日）で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_departure_date(self, departure_date: date) -> list[Flight]:
        """出発日で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: FlightStatus) -> list[Flight]:
        """ステータスで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_carrier(self, carrier_id: int) -> list[Flight]:
        """航空会社で検索する"""
        raise NotImplementedError
