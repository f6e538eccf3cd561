from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as dynamodb
from constructs import Construct


def _string_attribute(name: str) -> dynamodb.Attribute:
    return dynamodb.Attribute(name=name, type=dynamodb.AttributeType.STRING)


class Database(Construct):
    """DynamoDB Construct

    サービスごとにテーブルを分ける（フライトカタログ / 予約）。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        # GSI1: 全件一覧 / GSI2: 路線検索 / GSI3: 出発日検索
        self.flight_table = self._create_table("FlightCatalogTable")
        for index in ("GSI1", "GSI2", "GSI3"):
            self._add_index(self.flight_table, index)

        # GSI1: 乗客別の予約一覧
        self.booking_table = self._create_table("BookingTable")
        self._add_index(self.booking_table, "GSI1")

    def _create_table(self, id: str) -> dynamodb.Table:
        return dynamodb.Table(
            self,
            id,
            partition_key=_string_attribute("PK"),
            sort_key=_string_attribute("SK"),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            removal_policy=RemovalPolicy.DESTROY,
        )

    @staticmethod
    def _add_index(table: dynamodb.Table, index_name: str) -> None:
        table.add_global_secondary_index(
            index_name=index_name,
            partition_key=_string_attribute(f"{index_name}PK"),
            sort_key=_string_attribute(f"{index_name}SK"),
        )
