from datetime import datetime
from typing import NotRequired, TypedDict

from services.shared.domain import IsoDateTime, Role
from services.user.domain.entity import User
from services.user.domain.service import PasswordHasher
from services.user.domain.value_object import Email, UserId


class UserDetails(TypedDict):
    """ユーザー作成の入力データ構造"""

    first_name: str
    last_name: str
    email: str
    password: str
    role: NotRequired[Role]
    profile_image: NotRequired[str | None]


class UserFactory:
    """ユーザーエンティティのファクトリ（パスワードはハッシュ化して保持）"""

    def __init__(self, password_hasher: PasswordHasher) -> None:
        self._password_hasher = password_hasher

    def create(self, details: UserDetails, created_at: datetime) -> User:
        return User(
            id=UserId.generate(),
            first_name=details["first_name"],
            last_name=details["last_name"],
            email=Email(details["email"]),
            password_hash=self._password_hasher.hash(details["password"]),
            created_at=IsoDateTime(created_at),
            role=details.get("role", Role.USER),
            profile_image=details.get("profile_image"),
        )
