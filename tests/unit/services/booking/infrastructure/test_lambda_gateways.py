import io
import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError, ReadTimeoutError

from services.booking.infrastructure.lambda_flight_catalog_gateway import (
    LambdaFlightCatalogGateway,
)
from services.booking.infrastructure.lambda_invoker import (
    LambdaInvoker,
    RemoteInvocationError,
)
from services.booking.infrastructure.lambda_passenger_directory_gateway import (
    LambdaPassengerDirectoryGateway,
)
from services.shared.domain import FlightStatus, LookupOutcome


def _invoke_response(payload, function_error: str | None = None) -> dict:
    response = {
        "StatusCode": 200,
        "Payload": io.BytesIO(json.dumps(payload).encode("utf-8")),
    }
    if function_error:
        response["FunctionError"] = function_error
    return response


@pytest.fixture
def lambda_client():
    return MagicMock()


@pytest.fixture
def invoker(lambda_client):
    with patch("services.booking.infrastructure.lambda_invoker.boto3") as mock_boto3:
        mock_boto3.client.return_value = lambda_client
        yield LambdaInvoker("remote-function", timeout_seconds=0.5)


class TestLambdaInvoker:
    """LambdaInvoker のテスト"""

    def test_client_has_timeouts_and_no_retries(self):
        with patch(
            "services.booking.infrastructure.lambda_invoker.boto3"
        ) as mock_boto3:
            LambdaInvoker("remote-function", timeout_seconds=0.25)

        config = mock_boto3.client.call_args.kwargs["config"]
        assert config.connect_timeout == 0.25
        assert config.read_timeout == 0.25
        assert config.retries == {"max_attempts": 0}

    def test_timeout_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("REMOTE_CALL_TIMEOUT_SECONDS", "1.5")
        with patch(
            "services.booking.infrastructure.lambda_invoker.boto3"
        ) as mock_boto3:
            LambdaInvoker("remote-function")

        assert mock_boto3.client.call_args.kwargs["config"].read_timeout == 1.5

    def test_invoke_is_synchronous(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response({"ok": True})

        assert invoker.invoke({"flight_id": 1}) == {"ok": True}
        kwargs = lambda_client.invoke.call_args.kwargs
        assert kwargs["FunctionName"] == "remote-function"
        assert kwargs["InvocationType"] == "RequestResponse"
        assert json.loads(kwargs["Payload"]) == {"flight_id": 1}

    def test_function_error_raises(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"errorMessage": "boom"}, function_error="Unhandled"
        )

        with pytest.raises(RemoteInvocationError):
            invoker.invoke({"flight_id": 1})


class TestLambdaFlightCatalogGateway:
    """LambdaFlightCatalogGateway のテスト"""

    def test_found(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"found": True, "flight_id": 101, "status": "DELAYED"}
        )

        result = LambdaFlightCatalogGateway(invoker).lookup(101)

        assert result.outcome == LookupOutcome.FOUND
        assert result.value.status == FlightStatus.DELAYED

    def test_not_found(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"found": False, "flight_id": 101, "status": None}
        )

        result = LambdaFlightCatalogGateway(invoker).lookup(101)

        assert result.outcome == LookupOutcome.NOT_FOUND

    def test_timeout_is_unavailable(self, invoker, lambda_client):
        """タイムアウトは例外にせず UNAVAILABLE を返す"""
        lambda_client.invoke.side_effect = ReadTimeoutError(endpoint_url="https://x")

        result = LambdaFlightCatalogGateway(invoker).lookup(101)

        assert result.outcome == LookupOutcome.UNAVAILABLE

    def test_client_error_is_unavailable(self, invoker, lambda_client):
        lambda_client.invoke.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "no fn"}},
            "Invoke",
        )

        result = LambdaFlightCatalogGateway(invoker).lookup(101)

        assert result.outcome == LookupOutcome.UNAVAILABLE

    def test_unknown_status_is_unavailable(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"found": True, "flight_id": 101, "status": "TELEPORTED"}
        )

        result = LambdaFlightCatalogGateway(invoker).lookup(101)

        assert result.outcome == LookupOutcome.UNAVAILABLE


class TestLambdaPassengerDirectoryGateway:
    """LambdaPassengerDirectoryGateway のテスト"""

    def test_exists(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"passenger_id": 202, "exists": True}
        )

        result = LambdaPassengerDirectoryGateway(invoker).exists(202)

        assert result.outcome == LookupOutcome.FOUND
        assert result.value is True

    def test_does_not_exist(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"passenger_id": 202, "exists": False}
        )

        result = LambdaPassengerDirectoryGateway(invoker).exists(202)

        assert result.outcome == LookupOutcome.NOT_FOUND

    def test_function_error_is_unavailable(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response(
            {"errorMessage": "boom"}, function_error="Unhandled"
        )

        result = LambdaPassengerDirectoryGateway(invoker).exists(202)

        assert result.outcome == LookupOutcome.UNAVAILABLE

    def test_malformed_response_is_unavailable(self, invoker, lambda_client):
        lambda_client.invoke.return_value = _invoke_response({"passenger_id": 202})

        result = LambdaPassengerDirectoryGateway(invoker).exists(202)

        assert result.outcome == LookupOutcome.UNAVAILABLE

    @pytest.mark.parametrize("exists", ["false", "true", 1, None])
    def test_non_boolean_exists_is_unavailable(self, invoker, lambda_client, exists):
        """exists が真偽値でない応答は判定に使わない"""
        lambda_client.invoke.return_value = _invoke_response(
            {"passenger_id": 202, "exists": exists}
        )

        result = LambdaPassengerDirectoryGateway(invoker).exists(202)

        assert result.outcome == LookupOutcome.UNAVAILABLE
