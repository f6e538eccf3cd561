import os
from datetime import date
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.flight_catalog.domain.entity import Flight
from services.flight_catalog.domain.repository import FlightRepository
from services.flight_catalog.domain.value_object import FlightId, PriceTiers, Schedule
from services.shared.domain import FlightStatus, IsoDateTime
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
)

_PRICE_FIELDS = {
    "first_price": "first",
    "business_price": "business",
    "economy_price": "economy",
    "luggage_price": "luggage",
    "weight_price": "weight",
}


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    - GSI1: 全フライト一覧（FLIGHTS / FLIGHT#<id>）
    - GSI2: 路線検索（ROUTE#<出発>#<到着> / DEPARTURE#<出発時刻>#<id>）
    - GSI3: 出発日検索（DEPARTURE_DATE#<日付> / FLIGHT#<id>）、出発時刻未定は載せない
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def next_id(self) -> FlightId:
        """カウンタアイテムを原子的にインクリメントして採番する"""
        response = self.table.update_item(
            Key={"PK": "COUNTER", "SK": "FLIGHT"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "current_value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return FlightId(value=int(response["Attributes"]["current_value"]))

    def save(self, flight: Flight) -> None:
        """フライトを新規保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(flight),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Flight already exists: {flight.id}")
            raise

    def update(self, flight: Flight) -> None:
        """既存フライトを上書きする"""
        try:
            self.table.put_item(
                Item=self._to_item(flight),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Flight not found with id: {flight.id}"
                )
            raise

    def delete(self, flight_id: FlightId) -> None:
        try:
            self.table.delete_item(
                Key=self._key(flight_id),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Flight not found with id: {flight_id}"
                )
            raise

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        response = self.table.get_item(Key=self._key(flight_id), ConsistentRead=True)
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Flight]:
        items = self._query_all(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("FLIGHTS"),
        )
        return self._to_entities(items)

    def find_by_route(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_date: date | None = None,
    ) -> list[Flight]:
        condition = Key("GSI2PK").eq(
            f"ROUTE#{departure_airport_id}#{arrival_airport_id}"
        )
        if departure_date is not None:
            condition = condition & Key("GSI2SK").begins_with(
                f"DEPARTURE#{departure_date.isoformat()}"
            )
        items = self._query_all(IndexName="GSI2", KeyConditionExpression=condition)
        return self._to_entities(items)

    def find_by_departure_date(self, departure_date: date) -> list[Flight]:
        items = self._query_all(
            IndexName="GSI3",
            KeyConditionExpression=Key("GSI3PK").eq(
                f"DEPARTURE_DATE#{departure_date.isoformat()}"
            ),
        )
        return self._to_entities(items)

    def find_by_status(self, status: FlightStatus) -> list[Flight]:
        items = self._query_all(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("FLIGHTS"),
            FilterExpression=Attr("status").eq(status.value),
        )
        return self._to_entities(items)

    def find_by_carrier(self, carrier_id: int) -> list[Flight]:
        items = self._query_all(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq("FLIGHTS"),
            FilterExpression=Attr("carrier_id").eq(carrier_id),
        )
        return self._to_entities(items)

    def _query_all(self, **kwargs) -> list[dict]:
        """ページングを辿って全件取得する"""
        items: list[dict] = []
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    @staticmethod
    def _key(flight_id: FlightId) -> dict:
        return {"PK": f"FLIGHT#{flight_id}", "SK": "FLIGHT"}

    def _to_item(self, flight: Flight) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        sort_id = f"{flight.id.value:010d}"
        departure = flight.schedule.departure
        item = {
            **self._key(flight.id),
            "entity_type": "FLIGHT",
            "flight_id": flight.id.value,
            "carrier_id": flight.carrier_id,
            "departure_airport_id": flight.departure_airport_id,
            "arrival_airport_id": flight.arrival_airport_id,
            "status": flight.status.value,
            "GSI1PK": "FLIGHTS",
            "GSI1SK": f"FLIGHT#{sort_id}",
            "GSI2PK": (
                f"ROUTE#{flight.departure_airport_id}#{flight.arrival_airport_id}"
            ),
            "GSI2SK": f"DEPARTURE#{departure or 'UNSCHEDULED'}#{sort_id}",
        }
        if departure is not None:
            item["departure_time"] = str(departure)
            item["GSI3PK"] = f"DEPARTURE_DATE#{departure.calendar_date.isoformat()}"
            item["GSI3SK"] = f"FLIGHT#{sort_id}"
        if flight.schedule.arrival is not None:
            item["arrival_time"] = str(flight.schedule.arrival)
        for attribute, tier in _PRICE_FIELDS.items():
            price = getattr(flight.prices, tier)
            if price is not None:
                item[attribute] = str(price)
        return item

    def _to_entities(self, items: list[dict]) -> list[Flight]:
        flights = [
            self._to_entity(item)
            for item in items
            if item.get("entity_type") == "FLIGHT"
        ]
        return sorted(flights, key=lambda flight: flight.id.value)

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        departure = item.get("departure_time")
        arrival = item.get("arrival_time")
        return Flight(
            id=FlightId(value=int(item["flight_id"])),
            carrier_id=int(item["carrier_id"]),
            departure_airport_id=int(item["departure_airport_id"]),
            arrival_airport_id=int(item["arrival_airport_id"]),
            schedule=Schedule(
                departure=IsoDateTime.from_string(departure) if departure else None,
                arrival=IsoDateTime.from_string(arrival) if arrival else None,
            ),
            prices=PriceTiers(
                **{
                    tier: Decimal(item[attribute])
                    for attribute, tier in _PRICE_FIELDS.items()
                    if item.get(attribute) is not None
                }
            ),
            status=FlightStatus.parse(item.get("status")),
        )
