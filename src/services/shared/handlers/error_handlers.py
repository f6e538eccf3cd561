from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DependencyUnavailableException,
    DuplicateResourceException,
    InvalidArgumentException,
    OptimisticLockException,
    ResourceNotFoundException,
)

from .responses import json_response


def error_response(status_code: int, message: str) -> Response:
    return json_response(status_code, {"message": message})


def register_error_handlers(app: APIGatewayRestResolver, logger: Logger) -> None:
    """ドメイン例外を HTTP ステータスに変換するハンドラを登録する

    - 400: 入力不正（pydantic の ValidationError は ValueError のサブクラス）
    - 404: リソースなし（予約不可のフライトを含む）
    - 409: 重複・ビジネスルール違反・楽観ロック競合
    - 503: 権威ある依存サービス（フライトカタログ）に到達できない
    """

    @app.exception_handler([InvalidArgumentException, ValueError])
    def handle_invalid_argument(ex: Exception) -> Response:
        logger.info("Invalid request", extra={"error": str(ex)})
        return error_response(400, str(ex))

    @app.exception_handler(ResourceNotFoundException)
    def handle_not_found(ex: ResourceNotFoundException) -> Response:
        logger.info("Resource not found", extra={"error": str(ex)})
        return error_response(404, str(ex))

    @app.exception_handler(
        [
            DuplicateResourceException,
            BusinessRuleViolationException,
            OptimisticLockException,
        ]
    )
    def handle_conflict(ex: Exception) -> Response:
        logger.warning("Request conflicts with current state", extra={"error": str(ex)})
        return error_response(409, str(ex))

    @app.exception_handler(DependencyUnavailableException)
    def handle_dependency_unavailable(ex: DependencyUnavailableException) -> Response:
        logger.error("Dependency unavailable", extra={"error": str(ex)})
        return error_response(503, str(ex))

    @app.exception_handler(Exception)
    def handle_unexpected(ex: Exception) -> Response:
        logger.exception("Unhandled error")
        return error_response(500, "Internal server error")
