from services.user.domain.entity import User
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import UserId


class GetUserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def get(self, user_id: str) -> User:
        return self._repository.get(UserId(value=user_id), "User not found")
