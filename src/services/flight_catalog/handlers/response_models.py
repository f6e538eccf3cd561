from __future__ import annotations

from pydantic import BaseModel

from services.flight_catalog.domain.entity import Flight


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    flight_id: int
    carrier_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: str | None
    arrival_time: str | None
    first_price: str | None
    business_price: str | None
    economy_price: str | None
    luggage_price: str | None
    weight_price: str | None
    status: str
    min_price: str
    duration_minutes: int | None
    status_color: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: FlightData


class FlightListResponse(BaseModel):
    """一覧レスポンスモデル"""

    status: str = "success"
    count: int
    data: list[FlightData]


class FlightLookupResponse(BaseModel):
    """フライト照会の結果（予約サービス向け）"""

    found: bool
    flight_id: int
    status: str | None = None


def _optional_str(value: object | None) -> str | None:
    return None if value is None else str(value)


def to_flight_data(flight: Flight) -> FlightData:
    """Flight エンティティをレスポンスモデルに変換する"""
    return FlightData(
        flight_id=flight.id.value,
        carrier_id=flight.carrier_id,
        departure_airport_id=flight.departure_airport_id,
        arrival_airport_id=flight.arrival_airport_id,
        departure_time=_optional_str(flight.schedule.departure),
        arrival_time=_optional_str(flight.schedule.arrival),
        first_price=_optional_str(flight.prices.first),
        business_price=_optional_str(flight.prices.business),
        economy_price=_optional_str(flight.prices.economy),
        luggage_price=_optional_str(flight.prices.luggage),
        weight_price=_optional_str(flight.prices.weight),
        status=flight.status.value,
        min_price=str(flight.min_price),
        duration_minutes=flight.duration_minutes,
        status_color=flight.status_color,
    )


def to_response(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(data=to_flight_data(flight)).model_dump()


def to_list_response(flights: list[Flight]) -> dict:
    """Flight のリストをレスポンス辞書に変換する"""
    return FlightListResponse(
        count=len(flights),
        data=[to_flight_data(flight) for flight in flights],
    ).model_dump()
