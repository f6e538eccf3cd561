import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

METRICS_NAMESPACE = "SkynetBooking"


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        flight_table: dynamodb.Table,
        booking_table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        passenger_directory_function_name: str,
        remote_call_timeout_seconds: str = "0.5",
    ) -> None:
        super().__init__(scope, id)

        self._common_layer = common_layer

        self.flight_api = self._create_function(
            "FlightCatalogApiLambda",
            "services.flight_catalog.handlers.api.lambda_handler",
            "flight-catalog-service",
            flight_table,
        )

        self.flight_lookup = self._create_function(
            "FlightLookupLambda",
            "services.flight_catalog.handlers.lookup.lambda_handler",
            "flight-catalog-service",
            flight_table,
        )

        flight_table.grant_read_write_data(self.flight_api)
        flight_table.grant_read_data(self.flight_lookup)

        self.booking_api = self._create_function(
            "BookingApiLambda",
            "services.booking.handlers.api.lambda_handler",
            "booking-service",
            booking_table,
            extra_environment={
                "FLIGHT_CATALOG_FUNCTION_NAME": self.flight_lookup.function_name,
                "PASSENGER_DIRECTORY_FUNCTION_NAME": passenger_directory_function_name,
                "REMOTE_CALL_TIMEOUT_SECONDS": remote_call_timeout_seconds,
            },
        )

        booking_table.grant_read_write_data(self.booking_api)
        self.flight_lookup.grant_invoke(self.booking_api)

        # 乗客ディレクトリは別スタックの関数のため、名前から参照して権限を付与する
        passenger_directory = _lambda.Function.from_function_name(
            self, "PassengerDirectoryLambda", passenger_directory_function_name
        )
        passenger_directory.grant_invoke(self.booking_api)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        table: dynamodb.Table,
        extra_environment: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[self._common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_METRICS_NAMESPACE": METRICS_NAMESPACE,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                **(extra_environment or {}),
            },
        )
