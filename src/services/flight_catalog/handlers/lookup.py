from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight_catalog.applications.query_flights import FlightQueryService
from services.flight_catalog.domain.value_object import FlightId
from services.flight_catalog.handlers.request_models import FlightLookupRequest
from services.flight_catalog.handlers.response_models import FlightLookupResponse
from services.flight_catalog.infrastructure.dynamodb_flight_repository import (
    DynamoDBFlightRepository,
)

logger = Logger()

repository = DynamoDBFlightRepository()
service = FlightQueryService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """フライト照会 Lambda Handler（予約サービスから同期呼び出しされる）

    フライトの存在と現在のステータスだけを返す。
    """
    payload = event.get("Payload", event)
    request = FlightLookupRequest.model_validate(payload)
    logger.info(
        "Received flight lookup request", extra={"flight_id": request.flight_id}
    )

    flight = service.find(FlightId(value=request.flight_id))
    if flight is None:
        return FlightLookupResponse(
            found=False, flight_id=request.flight_id
        ).model_dump()

    return FlightLookupResponse(
        found=True,
        flight_id=request.flight_id,
        status=flight.status.value,
    ).model_dump()
