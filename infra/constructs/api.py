from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    サービスごとに REST API を作成し、配下のパスをすべて Lambda に委譲する。
    ルーティングは Lambda 側（APIGatewayRestResolver）で行う。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        flight_api: _lambda.Function,
        booking_api: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.flight_rest_api = self._create_rest_api(
            "FlightCatalogRestApi", "Flight Catalog API", "flights", flight_api
        )
        self.booking_rest_api = self._create_rest_api(
            "BookingRestApi", "Booking API", "bookings", booking_api
        )

    def _create_rest_api(
        self, id: str, name: str, root_path: str, handler: _lambda.Function
    ) -> apigw.RestApi:
        rest_api = apigw.RestApi(
            self,
            id,
            rest_api_name=name,
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        integration = apigw.LambdaIntegration(handler)

        # /<root_path> と /<root_path>/{proxy+}
        resource = rest_api.root.add_resource(root_path)
        resource.add_method("ANY", integration)
        resource.add_proxy(default_integration=integration, any_method=True)
        return rest_api
