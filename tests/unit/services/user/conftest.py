import copy

import pytest

from services.shared.domain import IsoDateTime, Role
from services.user.domain.entity import User
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.factory import UserFactory
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher
from services.user.domain.value_object import Email, UserId


class FakePasswordHasher(PasswordHasher):
    """テスト用のハッシュ実装（照合可能な接頭辞付き文字列）"""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password_hash: str, password: str) -> bool:
        return password_hash == f"hashed:{password}"


class InMemoryUserRepository(UserRepository):
    """テスト用のインメモリ実装（メールアドレスの一意性を保証する）"""

    def __init__(self) -> None:
        self._items: dict[UserId, User] = {}

    def save(self, user: User) -> None:
        if self.find_by_email(user.email) is not None:
            raise EmailAlreadyExistsException()
        self._items[user.id] = copy.deepcopy(user)

    def update(self, user: User, previous_email: Email | None = None) -> None:
        other = self.find_by_email(user.email)
        if other is not None and other.id != user.id:
            raise EmailAlreadyExistsException()
        self._items[user.id] = copy.deepcopy(user)

    def delete(self, user: User) -> None:
        self._items.pop(user.id, None)

    def find_by_id(self, user_id: UserId) -> User | None:
        stored = self._items.get(user_id)
        return copy.deepcopy(stored) if stored else None

    def find_by_email(self, email: Email) -> User | None:
        for user in self._items.values():
            if user.email == email:
                return copy.deepcopy(user)
        return None

    def find_all(self, role: Role | None = None) -> list[User]:
        users = [
            copy.deepcopy(user)
            for user in self._items.values()
            if role is None or user.role == role
        ]
        return sorted(users, key=lambda u: u.created_at.value, reverse=True)


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def user_factory(password_hasher):
    return UserFactory(password_hasher)


@pytest.fixture
def create_user(now):
    """User を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        user_id: str = "user-1",
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        email: str = "ada@example.com",
        password: str = "secret1",
        role: Role = Role.USER,
        profile_image: str | None = None,
    ) -> User:
        return User(
            id=UserId(value=user_id),
            first_name=first_name,
            last_name=last_name,
            email=Email(email),
            password_hash=f"hashed:{password}",
            created_at=IsoDateTime(now),
            role=role,
            profile_image=profile_image,
        )

    return _factory
