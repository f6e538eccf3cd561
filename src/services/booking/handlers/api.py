from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.event_handler import (
    APIGatewayRestResolver,
    Response,
    content_types,
)
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.query_booking import BookingQueryService
from services.booking.domain.factory import PnrGenerator, ReservationFactory
from services.booking.domain.value_object import ReservationId
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import (
    to_list_response,
    to_response,
)
from services.booking.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from services.booking.infrastructure.lambda_flight_catalog_gateway import (
    LambdaFlightCatalogGateway,
)
from services.booking.infrastructure.lambda_passenger_directory_gateway import (
    LambdaPassengerDirectoryGateway,
)
from services.shared.handlers import register_error_handlers
from services.shared.utils import to_int

logger = Logger()
metrics = Metrics()
app = APIGatewayRestResolver()
register_error_handlers(app, logger)

repository = DynamoDBReservationRepository()
create_service = CreateBookingService(
    repository=repository,
    factory=ReservationFactory(),
    pnr_generator=PnrGenerator(),
    flight_catalog=LambdaFlightCatalogGateway(),
    passenger_directory=LambdaPassengerDirectoryGateway(),
    metrics=metrics,
)
cancel_service = CancelBookingService(repository=repository, metrics=metrics)
query_service = BookingQueryService(repository=repository)


@app.post("/bookings")
def create_booking():
    request = CreateBookingRequest.model_validate_json(
        app.current_event.decoded_body or "{}"
    )
    reservation = create_service.create(
        flight_id=request.flight_id,
        passenger_id=request.passenger_id,
        seat_selection=request.seat_selection,
        luggage_count=request.luggage_count,
        luggage_weight=request.luggage_weight,
    )
    return to_response(reservation)


@app.get("/bookings/ping")
def ping():
    return Response(status_code=200, content_type=content_types.TEXT_PLAIN, body="pong")


@app.get("/bookings/pnr/<pnr>")
def find_by_pnr(pnr: str):
    return to_response(query_service.find_by_pnr(pnr))


@app.get("/bookings/passenger/<passenger_id>")
def list_by_passenger(passenger_id: str):
    reservations = query_service.list_by_passenger(to_int(passenger_id, "passenger_id"))
    return to_list_response(reservations)


@app.get("/bookings/<booking_id>")
def get_booking(booking_id: str):
    return to_response(query_service.get(_reservation_id(booking_id)))


@app.delete("/bookings/<booking_id>")
def cancel_booking(booking_id: str):
    cancelled = cancel_service.cancel(_reservation_id(booking_id))
    return {"booking_id": int(booking_id), "cancelled": cancelled}


@app.get("/bookings/<booking_id>/validate")
def validate_booking(booking_id: str):
    value = to_int(booking_id, "booking_id")
    valid = value > 0 and query_service.validate(ReservationId(value=value))
    return {"booking_id": value, "valid": valid}


@app.get("/bookings/<booking_id>/pnr")
def retrieve_pnr(booking_id: str):
    pnr = query_service.retrieve_pnr(_reservation_id(booking_id))
    return {"booking_id": int(booking_id), "pnr": str(pnr)}


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約 API Lambda Handler"""
    return app.resolve(event, context)


def _reservation_id(value: str) -> ReservationId:
    return ReservationId(value=to_int(value, "booking_id"))
