from datetime import date

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight_catalog.applications.check_duplicate import DuplicateRouteChecker
from services.flight_catalog.applications.create_flight import CreateFlightService
from services.flight_catalog.applications.delete_flight import DeleteFlightService
from services.flight_catalog.applications.query_flights import FlightQueryService
from services.flight_catalog.applications.update_flight import UpdateFlightService
from services.flight_catalog.applications.update_flight_status import (
    UpdateFlightStatusService,
)
from services.flight_catalog.domain.factory import FlightDetails, FlightFactory
from services.flight_catalog.domain.enum import SortCriterion
from services.flight_catalog.domain.value_object import FlightId, RouteSlot
from services.flight_catalog.handlers.request_models import (
    FlightRequest,
    FlightStatusRequest,
)
from services.flight_catalog.handlers.response_models import (
    to_list_response,
    to_response,
)
from services.flight_catalog.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)
from services.shared.domain import FlightStatus, IsoDateTime
from services.shared.handlers import json_response, register_error_handlers
from services.shared.utils import to_int, to_query_decimal

logger = Logger()
app = APIGatewayRestResolver()
register_error_handlers(app, logger)

repository = DynamoDBFlightRepository()
factory = FlightFactory()
duplicate_checker = DuplicateRouteChecker(repository=repository)
create_service = CreateFlightService(
    repository=repository, factory=factory, duplicate_checker=duplicate_checker
)
update_service = UpdateFlightService(
    repository=repository, factory=factory, duplicate_checker=duplicate_checker
)
delete_service = DeleteFlightService(repository=repository)
status_service = UpdateFlightStatusService(repository=repository)
query_service = FlightQueryService(repository=repository)


# NOTE: /flights/<flight_id> より先に固定パスのルートを登録する（先勝ち）


@app.post("/flights")
def create_flight():
    request = FlightRequest.model_validate_json(_body())
    flight = create_service.create(_to_flight_details(request))
    return json_response(201, to_response(flight))


@app.get("/flights")
def list_flights():
    return to_list_response(query_service.list_all())


@app.get("/flights/check-duplicate")
def check_duplicate():
    slot = RouteSlot(
        carrier_id=to_int(_query("carrier_id"), "carrier_id"),
        departure_airport_id=to_int(
            _query("departure_airport_id"), "departure_airport_id"
        ),
        arrival_airport_id=to_int(_query("arrival_airport_id"), "arrival_airport_id"),
        departure_date=_to_date(_query("date")),
    )
    exclude_id = _query("exclude_id")
    is_duplicate = duplicate_checker.is_slot_taken(
        slot,
        exclude_id=_flight_id(exclude_id) if exclude_id else None,
    )
    return {"is_duplicate": is_duplicate}


@app.get("/flights/search/date")
def search_by_date():
    return to_list_response(query_service.search_by_date(_to_date(_query("date"))))


@app.get("/flights/search/route")
def search_by_route():
    departure, arrival = _route_params()
    return to_list_response(query_service.search_by_route(departure, arrival))


@app.get("/flights/search/route-date")
def search_by_route_and_date():
    departure, arrival = _route_params()
    flights = query_service.search_by_route_and_date(
        departure, arrival, _to_date(_query("date"))
    )
    return to_list_response(flights)


@app.get("/flights/filter/price/max")
def filter_by_max_price():
    max_price = to_query_decimal(_query("max_price"), "max_price")
    return to_list_response(query_service.filter_by_max_price(max_price))


@app.get("/flights/filter/price/range")
def filter_by_price_range():
    flights = query_service.filter_by_price_range(
        to_query_decimal(_query("min_price"), "min_price"),
        to_query_decimal(_query("max_price"), "max_price"),
    )
    return to_list_response(flights)


@app.get("/flights/filter/duration/max")
def filter_by_max_duration():
    max_minutes = to_int(_query("max_minutes"), "max_minutes")
    return to_list_response(query_service.filter_by_max_duration(max_minutes))


@app.get("/flights/filter/duration/range")
def filter_by_duration_range():
    flights = query_service.filter_by_duration_range(
        to_int(_query("min_minutes"), "min_minutes"),
        to_int(_query("max_minutes"), "max_minutes"),
    )
    return to_list_response(flights)


@app.get("/flights/sort/<criterion>")
def sort_flights(criterion: str):
    order = (_query("order") or "asc").lower()
    if order not in ("asc", "desc"):
        raise ValueError(f"order must be 'asc' or 'desc': {order}")
    flights = query_service.sort(
        SortCriterion.parse(criterion), descending=order == "desc"
    )
    return to_list_response(flights)


@app.get("/flights/carrier/<carrier_id>")
def list_by_carrier(carrier_id: str):
    return to_list_response(
        query_service.list_by_carrier(to_int(carrier_id, "carrier_id"))
    )


@app.get("/flights/status/<status>")
def list_by_status(status: str):
    return to_list_response(query_service.list_by_status(FlightStatus.parse(status)))


@app.get("/flights/<flight_id>")
def get_flight(flight_id: str):
    return to_response(query_service.get(_flight_id(flight_id)))


@app.put("/flights/<flight_id>")
def update_flight(flight_id: str):
    request = FlightRequest.model_validate_json(_body())
    flight = update_service.update(_flight_id(flight_id), _to_flight_details(request))
    return to_response(flight)


@app.delete("/flights/<flight_id>")
def delete_flight(flight_id: str):
    delete_service.delete(_flight_id(flight_id))
    return {"status": "success", "message": f"Flight {flight_id} deleted"}


@app.get("/flights/<flight_id>/status")
def get_flight_status(flight_id: str):
    status = query_service.get_status(_flight_id(flight_id))
    return {"flight_id": int(flight_id), "status": status.value}


@app.put("/flights/<flight_id>/status")
def update_flight_status(flight_id: str):
    request = FlightStatusRequest.model_validate_json(_body())
    flight = status_service.update_status(
        _flight_id(flight_id), FlightStatus.parse(request.status)
    )
    return to_response(flight)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """フライトカタログ API Lambda Handler"""
    return app.resolve(event, context)


def _body() -> str:
    return app.current_event.decoded_body or "{}"


def _query(name: str) -> str | None:
    return app.current_event.get_query_string_value(name=name)


def _flight_id(value: str) -> FlightId:
    return FlightId(value=to_int(value, "flight_id"))


def _route_params() -> tuple[int, int]:
    return (
        to_int(_query("departure_airport_id"), "departure_airport_id"),
        to_int(_query("arrival_airport_id"), "arrival_airport_id"),
    )


def _to_date(value: str | None) -> date:
    """日付（"2025-01-01"）または日時（"2025-01-01 10:00"）から日付を取り出す"""
    if value is None or not value.strip():
        raise ValueError("date is required")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return IsoDateTime.from_string(value).calendar_date


def _to_flight_details(request: FlightRequest) -> FlightDetails:
    """リクエストボディから FlightDetails を構築する"""
    return {
        "carrier_id": request.carrier_id,
        "departure_airport_id": request.departure_airport_id,
        "arrival_airport_id": request.arrival_airport_id,
        "departure_time": request.departure_time,
        "arrival_time": request.arrival_time,
        "first_price": request.first_price,
        "business_price": request.business_price,
        "economy_price": request.economy_price,
        "luggage_price": request.luggage_price,
        "weight_price": request.weight_price,
        "status": request.status,
    }
