import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.booking.domain.entity import Reservation
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import ReservationRepository
from services.booking.domain.value_object import Pnr, ReservationId, Seat
from services.shared.domain import IsoDateTime
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

_serializer = TypeSerializer()


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装

    - 予約アイテム: BOOKING#<id> / BOOKING
    - PNR ガードアイテム: PNR#<pnr> / PNR（PNR の一意性制約、予約IDを保持）
    - GSI1: 乗客別一覧（PASSENGER#<乗客ID> / BOOKING#<id>）
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def next_id(self) -> ReservationId:
        """カウンタアイテムを原子的にインクリメントして採番する"""
        response = self.table.update_item(
            Key={"PK": "COUNTER", "SK": "BOOKING"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "current_value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return ReservationId(value=int(response["Attributes"]["current_value"]))

    def save(self, reservation: Reservation) -> None:
        """予約アイテムと PNR ガードアイテムを1トランザクションで書き込む"""
        guard = {
            **self._pnr_key(reservation.pnr),
            "entity_type": "PNR",
            "booking_id": reservation.id.value,
        }
        try:
            self.dynamodb.meta.client.transact_write_items(
                TransactItems=[
                    self._conditional_put(self._to_item(reservation)),
                    self._conditional_put(guard),
                ]
            )
        except ClientError as e:
            if _is_condition_failure(e):
                raise DuplicateResourceException(
                    f"Booking or PNR already exists: "
                    f"booking_id={reservation.id}, pnr={reservation.pnr}"
                )
            raise

    def update(
        self, reservation: Reservation, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": self._key(reservation.id),
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": reservation.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={reservation.id}"
                )
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        response = self.table.get_item(
            Key=self._key(reservation_id), ConsistentRead=True
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_pnr(self, pnr: Pnr) -> Reservation | None:
        """PNR ガードアイテムから予約IDを引いて検索する"""
        response = self.table.get_item(Key=self._pnr_key(pnr), ConsistentRead=True)
        guard = response.get("Item")
        if not guard:
            return None
        return self.find_by_id(ReservationId(value=int(guard["booking_id"])))

    def find_by_passenger(self, passenger_id: int) -> list[Reservation]:
        items: list[dict] = []
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"PASSENGER#{passenger_id}"),
        }
        while True:
            response = self.table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key

        reservations = [self._to_entity(item) for item in items]
        return sorted(reservations, key=lambda reservation: reservation.id.value)

    def _conditional_put(self, item: dict) -> dict:
        return {
            "Put": {
                "TableName": self.table_name,
                "Item": {k: _serializer.serialize(v) for k, v in item.items()},
                "ConditionExpression": "attribute_not_exists(PK)",
            }
        }

    @staticmethod
    def _key(reservation_id: ReservationId) -> dict:
        return {"PK": f"BOOKING#{reservation_id}", "SK": "BOOKING"}

    @staticmethod
    def _pnr_key(pnr: Pnr) -> dict:
        return {"PK": f"PNR#{pnr}", "SK": "PNR"}

    def _to_item(self, reservation: Reservation) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        return {
            **self._key(reservation.id),
            "entity_type": "BOOKING",
            "booking_id": reservation.id.value,
            "pnr": str(reservation.pnr),
            "flight_id": reservation.flight_id,
            "passenger_id": reservation.passenger_id,
            "seat_id": reservation.seat.value,
            "luggage_count": reservation.luggage_count,
            "luggage_weight": str(reservation.luggage_weight),
            "status": reservation.status.value,
            "created_at": str(reservation.created_at),
            "GSI1PK": f"PASSENGER#{reservation.passenger_id}",
            "GSI1SK": f"BOOKING#{reservation.id.value:010d}",
        }

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Reservation(
            id=ReservationId(value=int(item["booking_id"])),
            pnr=Pnr(value=item["pnr"]),
            flight_id=int(item["flight_id"]),
            passenger_id=int(item["passenger_id"]),
            seat=Seat(value=int(item.get("seat_id", 0))),
            luggage_count=int(item.get("luggage_count", 0)),
            luggage_weight=Decimal(item.get("luggage_weight", "0")),
            status=BookingStatus(item["status"]),
            created_at=IsoDateTime.from_string(item["created_at"]),
        )


def _is_condition_failure(error: ClientError) -> bool:
    """トランザクションが存在チェックの失敗で取り消されたか

    競合やスロットリングによる取り消しは重複として扱わない。
    """
    if error.response["Error"]["Code"] != "TransactionCanceledException":
        return False
    reasons = error.response.get("CancellationReasons", [])
    return any(reason.get("Code") == "ConditionalCheckFailed" for reason in reasons)
