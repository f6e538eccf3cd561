import os

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from services.booking.domain.gateway import PassengerDirectoryGateway
from services.booking.infrastructure.lambda_invoker import (
    LambdaInvoker,
    RemoteInvocationError,
)
from services.shared.domain import LookupResult

logger = Logger(child=True)


class LambdaPassengerDirectoryGateway(PassengerDirectoryGateway):
    """乗客存在確認 Lambda を呼び出す PassengerDirectoryGateway の具象実装"""

    def __init__(self, invoker: LambdaInvoker | None = None) -> None:
        self._invoker = invoker or LambdaInvoker(
            os.getenv("PASSENGER_DIRECTORY_FUNCTION_NAME")
        )

    def exists(self, passenger_id: int) -> LookupResult[bool]:
        try:
            response = self._invoker.invoke({"passenger_id": passenger_id})
        except (BotoCoreError, ClientError, RemoteInvocationError) as e:
            logger.warning(
                "Passenger lookup failed",
                extra={"passenger_id": passenger_id, "error": str(e)},
            )
            return LookupResult.unavailable(str(e))

        if not isinstance(response.get("exists"), bool):
            return LookupResult.unavailable(f"Unexpected response: {response!r}")
        if not response["exists"]:
            return LookupResult.not_found()
        return LookupResult.found(True)
