import os

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.gateway import FlightCatalogGateway
from services.booking.domain.value_object import FlightSnapshot
from services.booking.infrastructure.lambda_invoker import (
    LambdaInvoker,
    RemoteInvocationError,
)
from services.shared.domain import (
    FlightStatus,
    InvalidArgumentException,
    LookupResult,
)

logger = Logger(child=True)


class LambdaFlightCatalogGateway(FlightCatalogGateway):
    """フライト照会 Lambda を呼び出す FlightCatalogGateway の具象実装"""

    def __init__(self, invoker: LambdaInvoker | None = None) -> None:
        self._invoker = invoker or LambdaInvoker(
            os.getenv("FLIGHT_CATALOG_FUNCTION_NAME")
        )

    def lookup(self, flight_id: int) -> LookupResult[FlightSnapshot]:
        try:
            response = self._invoker.invoke({"flight_id": flight_id})
        except (BotoCoreError, ClientError, RemoteInvocationError) as e:
            logger.warning(
                "Flight lookup failed", extra={"flight_id": flight_id, "error": str(e)}
            )
            return LookupResult.unavailable(str(e))

        if not response.get("found"):
            return LookupResult.not_found()
        try:
            status = FlightStatus.parse(response.get("status"))
        except InvalidArgumentException as e:
            return LookupResult.unavailable(f"Unexpected flight status: {e}")
        return LookupResult.found(FlightSnapshot(flight_id=flight_id, status=status))
