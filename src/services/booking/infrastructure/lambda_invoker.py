import json
import os

import boto3
from botocore.config import Config

DEFAULT_TIMEOUT_SECONDS = 0.5


class RemoteInvocationError(Exception):
    """呼び出し先 Lambda が関数エラーを返した、または応答を解釈できない場合"""

    pass


class LambdaInvoker:
    """他サービスの Lambda を同期呼び出しする

    呼び出しごとに接続・読み取りタイムアウトを設け、リトライは行わない。
    """

    def __init__(
        self, function_name: str | None, timeout_seconds: float | None = None
    ) -> None:
        if timeout_seconds is None:
            timeout_seconds = float(
                os.getenv("REMOTE_CALL_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
            )
        self.function_name = function_name
        self.client = boto3.client(
            "lambda",
            config=Config(
                connect_timeout=timeout_seconds,
                read_timeout=timeout_seconds,
                retries={"max_attempts": 0},
            ),
        )

    def invoke(self, payload: dict) -> dict:
        """RequestResponse で呼び出し、応答の JSON を返す"""
        response = self.client.invoke(
            FunctionName=self.function_name,
            InvocationType="RequestResponse",
            Payload=json.dumps(payload).encode("utf-8"),
        )
        body = response["Payload"].read()
        if response.get("FunctionError"):
            raise RemoteInvocationError(
                f"{self.function_name} failed: {response['FunctionError']} {body!r}"
            )
        try:
            result = json.loads(body)
        except ValueError as e:
            raise RemoteInvocationError(
                f"{self.function_name} returned invalid JSON: {body!r}"
            ) from e
        if not isinstance(result, dict):
            raise RemoteInvocationError(
                f"{self.function_name} returned unexpected payload: {result!r}"
            )
        return result
