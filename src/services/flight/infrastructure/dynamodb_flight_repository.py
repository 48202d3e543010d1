import os

import boto3
from boto3.dynamodb.conditions import Key

from services.flight.domain.entity import Flight
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightId, FlightNumber
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.utils.validators import to_decimal


class DynamoDBFlightRepository(FlightRepository):
    """DynamoDBを使用したFlightRepository の具象実装

    フライトアイテム:
        PK=FLIGHT#<flight_id>, SK=METADATA
        GSI1PK=FLIGHT_NUMBER#<flight_number>, GSI1SK=FLIGHT#<flight_id>
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"FLIGHT#{flight_id}", "SK": "METADATA"},
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_number(self, flight_number: FlightNumber) -> Flight | None:
        """フライト番号で検索（GSI1）"""
        response = self.table.query(
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"FLIGHT_NUMBER#{flight_number}"),
            Limit=1,
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def _to_entity(self, item: dict) -> Flight:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Flight(
            id=FlightId(value=item["flight_id"]),
            flight_number=FlightNumber(value=item["flight_number"]),
            schedule=IsoDateTime.from_string(item["schedule"]),
            price=Money(
                amount=to_decimal(item["price_amount"]),
                currency=Currency.of(item.get("price_currency")),
            ),
        )
