import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.shared.domain import IsoDateTime, Role
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from services.shared.utils.dynamodb import cancellation_codes, query_all
from services.user.domain.entity import User
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email, UserId

ENTITY_TYPE = "USER"
NOT_EXISTS = "attribute_not_exists(PK)"
EXISTS = "attribute_exists(PK)"
GUARD_OWNED_OR_GONE = "attribute_not_exists(PK) OR user_id = :uid"


class DynamoDBUserRepository(UserRepository):
    """DynamoDBを使用したUserRepository の具象実装

    ユーザーアイテム:
        PK=USER#<user_id>, SK=PROFILE
        GSI1PK=USERS, GSI1SK=USER#<created_at>#<user_id>
    メールアドレスガード:
        PK=EMAIL#<email>, SK=EMAIL
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, user: User) -> None:
        """ユーザーとメールアドレスガードを1トランザクションで書き込む"""
        try:
            self._transact(
                [
                    self._put(self._to_item(user), NOT_EXISTS),
                    self._put(self._email_guard_item(user), NOT_EXISTS),
                ]
            )
        except ClientError as e:
            codes = cancellation_codes(e)
            if not codes:
                raise
            if codes[1] == "ConditionalCheckFailed":
                raise EmailAlreadyExistsException() from e
            if codes[0] == "ConditionalCheckFailed":
                raise DuplicateResourceException(
                    f"User already exists: {user.id}"
                ) from e
            raise

    def update(self, user: User, previous_email: Email | None = None) -> None:
        """ユーザーを更新する（メールアドレス変更時はガードを付け替える）"""
        transact_items = [self._put(self._to_item(user), EXISTS)]
        email_changed = previous_email is not None and previous_email != user.email
        if email_changed:
            transact_items.append(self._put(self._email_guard_item(user), NOT_EXISTS))
            transact_items.append(self._delete_email_guard(user, previous_email))

        try:
            self._transact(transact_items)
        except ClientError as e:
            codes = cancellation_codes(e)
            if not codes:
                raise
            if email_changed and codes[1] == "ConditionalCheckFailed":
                raise EmailAlreadyExistsException() from e
            if codes[0] == "ConditionalCheckFailed":
                raise ResourceNotFoundException("User not found") from e
            raise

    def delete(self, user: User) -> None:
        """ユーザーを削除し、メールアドレスガードを解放する"""
        try:
            self._transact(
                [
                    {
                        "Delete": {
                            "TableName": self.table_name,
                            "Key": {"PK": f"USER#{user.id}", "SK": "PROFILE"},
                            "ConditionExpression": EXISTS,
                        }
                    },
                    self._delete_email_guard(user, user.email),
                ]
            )
        except ClientError as e:
            codes = cancellation_codes(e)
            if codes and codes[0] == "ConditionalCheckFailed":
                raise ResourceNotFoundException("User not found") from e
            raise

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_email(self, email: Email) -> User | None:
        """メールアドレスで検索（ガードアイテム経由）"""
        response = self.table.get_item(
            Key={"PK": f"EMAIL#{email}", "SK": "EMAIL"},
            ConsistentRead=True,
        )
        guard = response.get("Item")
        if not guard:
            return None
        return self.find_by_id(UserId(value=guard["user_id"]))

    def find_all(self, role: Role | None = None) -> list[User]:
        """ユーザー一覧を作成日時の新しい順に取得（GSI1）"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq("USERS"),
            "ScanIndexForward": False,
        }
        if role is not None:
            kwargs["FilterExpression"] = Attr("role").eq(role.value)
        return [self._to_entity(item) for item in query_all(self.table, **kwargs)]

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

    def _delete_email_guard(self, user: User, email: Email) -> dict:
        return {
            "Delete": {
                "TableName": self.table_name,
                "Key": {"PK": f"EMAIL#{email}", "SK": "EMAIL"},
                "ConditionExpression": GUARD_OWNED_OR_GONE,
                "ExpressionAttributeValues": {":uid": str(user.id)},
            }
        }

    def _email_guard_item(self, user: User) -> dict:
        return {
            "PK": f"EMAIL#{user.email}",
            "SK": "EMAIL",
            "entity_type": "EMAIL",
            "user_id": str(user.id),
        }

    def _to_item(self, user: User) -> dict:
        """ドメインエンティティを DynamoDB アイテムに変換する"""
        item = {
            "PK": f"USER#{user.id}",
            "SK": "PROFILE",
            "entity_type": ENTITY_TYPE,
            "user_id": str(user.id),
            "first_name": user.first_name,
            "last_name": user.last_name,
            "email": str(user.email),
            "password_hash": user.password_hash,
            "role": user.role.value,
            "created_at": str(user.created_at),
            "GSI1PK": "USERS",
            "GSI1SK": f"USER#{user.created_at}#{user.id}",
        }
        if user.profile_image:
            item["profile_image"] = user.profile_image
        return item

    def _to_entity(self, item: dict) -> User:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return User(
            id=UserId(value=item["user_id"]),
            first_name=item["first_name"],
            last_name=item["last_name"],
            email=Email(item["email"]),
            password_hash=item["password_hash"],
            created_at=IsoDateTime.from_string(item["created_at"]),
            role=Role(item.get("role", Role.USER.value)),
            profile_image=item.get("profile_image"),
        )
