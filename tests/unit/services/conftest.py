import json
import os
from unittest.mock import MagicMock

import pytest

# ハンドラモジュールの import 時に boto3 のクライアントを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "test-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "SkynetBookingTest")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def lambda_context():
    """Lambda コンテキストのフィクスチャ"""
    context = MagicMock()
    context.function_name = "test-function"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    context.aws_request_id = "test-request-id"
    return context


@pytest.fixture
def api_event():
    """API Gateway (REST) のイベントを生成する Factory fixture"""

    def _factory(
        method: str,
        path: str,
        body: dict | None = None,
        query: dict[str, str] | None = None,
    ) -> dict:
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {"Content-Type": ["application/json"]},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": (
                {key: [value] for key, value in query.items()} if query else None
            ),
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "accountId": "123456789012",
                "apiId": "test-api",
                "httpMethod": method,
                "path": f"/prod{path}",
                "requestId": "test-request-id",
                "resourcePath": path,
                "stage": "prod",
                "identity": {"sourceIp": "127.0.0.1"},
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
