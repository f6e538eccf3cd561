from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers

DEFAULT_PASSENGER_DIRECTORY_FUNCTION = "passenger-directory-exists"


class SkynetBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # 乗客ディレクトリは別スタックで管理しているため、関数名をコンテキストで受け取る
        passenger_directory_function_name = (
            self.node.try_get_context("passenger_directory_function_name")
            or DEFAULT_PASSENGER_DIRECTORY_FUNCTION
        )

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            flight_table=database.flight_table,
            booking_table=database.booking_table,
            common_layer=layers.common_layer,
            passenger_directory_function_name=passenger_directory_function_name,
        )

        api = Api(
            self,
            "Api",
            flight_api=fns.flight_api,
            booking_api=fns.booking_api,
        )

        CfnOutput(self, "FlightCatalogApiUrl", value=api.flight_rest_api.url)
        CfnOutput(self, "BookingApiUrl", value=api.booking_rest_api.url)
