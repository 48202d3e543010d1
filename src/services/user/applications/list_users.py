from services.shared.domain import Role
from services.user.domain.entity import User
from services.user.domain.repository import UserRepository


class ListUsersService:
    """ユーザー一覧ユースケース（新しい順、ロールで絞り込み可）"""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def list_users(self, role: Role | None = None) -> list[User]:
        return self._repository.find_all(role=role)
