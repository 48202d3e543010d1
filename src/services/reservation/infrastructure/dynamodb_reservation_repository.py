import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.flight.domain.value_object import FlightId
from services.reservation.domain.entity import Reservation
from services.reservation.domain.enum import ReservationStatus
from services.reservation.domain.exception import (
    PnrCollisionException,
    SeatAlreadyBookedException,
)
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import (
    Baggage,
    Meal,
    Passenger,
    Pnr,
    ReservationId,
    Seat,
)
from services.shared.domain import Currency, IsoDateTime, Money
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)
from services.shared.utils.dynamodb import cancellation_codes, query_all, scan_all

ENTITY_TYPE = "RESERVATION"
NOT_EXISTS = "attribute_not_exists(PK)"
LOCK_OWNED_OR_GONE = "attribute_not_exists(PK) OR reservation_id = :rid"
_SEAT_RACE_CODES = ("ConditionalCheckFailed", "TransactionConflict")


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装

    予約アイテム:
        PK=RESERVATION#<id>, SK=METADATA
        GSI1PK=FLIGHT#<flight_id>, GSI1SK=RESERVATION#<id>
        GSI2PK=USER#<user_id>, GSI2SK=RESERVATION#<created_at>#<id>
    座席ロック（有効な予約のみ）:
        PK=FLIGHT#<flight_id>, SK=SEAT#<seat_code>
    予約番号ガード:
        PK=PNR#<pnr>, SK=PNR
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, reservation: Reservation) -> None:
        """予約・座席ロック・予約番号ガードを1トランザクションで書き込む"""
        transact_items = [
            self._put(self._to_item(reservation), NOT_EXISTS),
            self._put(self._seat_lock_item(reservation), NOT_EXISTS),
            self._put(
                {
                    "PK": f"PNR#{reservation.pnr}",
                    "SK": "PNR",
                    "entity_type": "PNR",
                    "reservation_id": str(reservation.id),
                },
                NOT_EXISTS,
            ),
        ]
        try:
            self._transact(transact_items)
        except ClientError as e:
            codes = cancellation_codes(e)
            if not codes:
                raise
            if codes[1] in _SEAT_RACE_CODES:
                raise SeatAlreadyBookedException(
                    reservation.seat.code, race_detected=True
                ) from e
            if codes[0] == "ConditionalCheckFailed":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                ) from e
            if codes[2] == "ConditionalCheckFailed":
                raise PnrCollisionException(reservation.pnr) from e
            raise

    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus,
        previous_seat: Seat | None = None,
    ) -> None:
        """予約を更新する

        座席が変わった場合は新しい座席ロックを取得し、古いロックを解放する。
        """
        transact_items = [self._put_with_status(reservation, expected_status)]
        seat_changed = (
            previous_seat is not None and previous_seat.code != reservation.seat.code
        )
        if seat_changed:
            transact_items.append(
                self._put(self._seat_lock_item(reservation), NOT_EXISTS)
            )
            transact_items.append(
                self._delete_seat_lock(reservation, previous_seat.code)
            )

        try:
            self._transact(transact_items)
        except ClientError as e:
            codes = cancellation_codes(e)
            if not codes:
                raise
            if seat_changed and codes[1] in _SEAT_RACE_CODES:
                raise SeatAlreadyBookedException(
                    reservation.seat.code, race_detected=True
                ) from e
            if codes[0] == "ConditionalCheckFailed":
                raise OptimisticLockException(
                    f"Reservation status conflict: "
                    f"expected {expected_status.value}, "
                    f"reservation_id={reservation.id}"
                ) from e
            raise

    def cancel(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> None:
        """キャンセル状態を保存し、座席ロックを解放する"""
        transact_items = [
            self._put_with_status(reservation, expected_status),
            self._delete_seat_lock(reservation, reservation.seat.code),
        ]
        try:
            self._transact(transact_items)
        except ClientError as e:
            codes = cancellation_codes(e)
            if codes and codes[0] == "ConditionalCheckFailed":
                raise OptimisticLockException(
                    f"Reservation status conflict: "
                    f"expected {expected_status.value}, "
                    f"reservation_id={reservation.id}"
                ) from e
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"RESERVATION#{reservation_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_active_by_flight(self, flight_id: FlightId) -> list[Reservation]:
        """フライトの有効な予約を検索（GSI1）"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(f"FLIGHT#{flight_id}")
            & Key("GSI1SK").begins_with("RESERVATION#"),
            FilterExpression=Attr("status").eq(ReservationStatus.ACTIVE.value),
        )
        return [self._to_entity(item) for item in items]

    def find_by_user(self, user_id: str) -> list[Reservation]:
        """ユーザーの予約を作成日時順に検索（GSI2）"""
        items = query_all(
            self.table,
            IndexName="GSI2",
            KeyConditionExpression=Key("GSI2PK").eq(f"USER#{user_id}")
            & Key("GSI2SK").begins_with("RESERVATION#"),
        )
        return [self._to_entity(item) for item in items]

    def find_all(self) -> list[Reservation]:
        """全予約を取得"""
        items = scan_all(
            self.table,
            FilterExpression=Attr("entity_type").eq(ENTITY_TYPE),
        )
        reservations = [self._to_entity(item) for item in items]
        return sorted(reservations, key=lambda r: r.created_at.value)

    def exists_pnr(self, pnr: Pnr) -> bool:
        response = self.table.get_item(
            Key={"PK": f"PNR#{pnr}", "SK": "PNR"},
            ConsistentRead=True,
        )
        return "Item" in response

    def _transact(self, transact_items: list[dict]) -> None:
        self.dynamodb.meta.client.transact_write_items(TransactItems=transact_items)

    def _put(self, item: dict, condition: str) -> dict:
        return {
            "Put": {
                "TableName": self.table_name,
                "Item": item,
                "ConditionExpression": condition,
            }
        }

    def _put_with_status(
        self, reservation: Reservation, expected_status: ReservationStatus
    ) -> dict:
        return {
            "Put": {
                "TableName": self.table_name,
                "Item": self._to_item(reservation),
                "ConditionExpression": "attribute_exists(PK) AND #status = :expected",
                "ExpressionAttributeNames": {"#status": "status"},
                "ExpressionAttributeValues": {":expected": expected_status.value},
            }
        }

    def _delete_seat_lock(self, reservation: Reservation, seat_code: str) -> dict:
        return {
            "Delete": {
                "TableName": self.table_name,
                "Key": {
                    "PK": f"FLIGHT#{reservation.flight_id}",
                    "SK": f"SEAT#{seat_code}",
                },
                "ConditionExpression": LOCK_OWNED_OR_GONE,
                "ExpressionAttributeValues": {":rid": str(reservation.id)},
            }
        }

    def _seat_lock_item(self, reservation: Reservation) -> dict:
        return {
            "PK": f"FLIGHT#{reservation.flight_id}",
            "SK": f"SEAT#{reservation.seat.code}",
            "entity_type": "SEAT_LOCK",
            "reservation_id": str(reservation.id),
        }

    def _to_item(self, reservation: Reservation) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        bill = reservation.bill
        item = {
            "PK": f"RESERVATION#{reservation.id}",
            "SK": "METADATA",
            "entity_type": ENTITY_TYPE,
            "reservation_id": str(reservation.id),
            "pnr": str(reservation.pnr),
            "flight_id": str(reservation.flight_id),
            "first_name": reservation.passenger.first_name,
            "last_name": reservation.passenger.last_name,
            "email": reservation.passenger.email,
            "passport": reservation.passenger.passport,
            "seat_code": reservation.seat.code,
            "is_premium": reservation.seat.is_premium,
            "meal_label": reservation.meal.label,
            "meal_price": str(reservation.meal.price.amount),
            "baggage_kg": reservation.baggage.kg,
            "base_fare": str(bill.base_fare.amount),
            "baggage_surcharge": str(bill.baggage_surcharge.amount),
            "total": str(bill.total.amount),
            "currency": str(bill.base_fare.currency),
            "status": reservation.status.value,
            "created_at": str(reservation.created_at),
            "GSI1PK": f"FLIGHT#{reservation.flight_id}",
            "GSI1SK": f"RESERVATION#{reservation.id}",
        }
        if reservation.user_id:
            item["user_id"] = reservation.user_id
            item["GSI2PK"] = f"USER#{reservation.user_id}"
            item["GSI2SK"] = f"RESERVATION#{reservation.created_at}#{reservation.id}"
        return item

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency.of(item.get("currency"))
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            pnr=Pnr(item["pnr"]),
            flight_id=FlightId(value=item["flight_id"]),
            user_id=item.get("user_id"),
            passenger=Passenger(
                first_name=item["first_name"],
                last_name=item["last_name"],
                email=item["email"],
                passport=item["passport"],
            ),
            seat=Seat(code=item["seat_code"], is_premium=bool(item["is_premium"])),
            meal=Meal(
                label=item["meal_label"],
                price=Money(amount=Decimal(item["meal_price"]), currency=currency),
            ),
            baggage=Baggage(kg=int(item.get("baggage_kg", 0))),
            base_fare=Money(amount=Decimal(item["base_fare"]), currency=currency),
            baggage_surcharge=Money(
                amount=Decimal(item.get("baggage_surcharge", "0")),
                currency=currency,
            ),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=ReservationStatus(item["status"]),
        )
