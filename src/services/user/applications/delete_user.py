from services.user.domain.repository import UserRepository
from services.user.domain.value_object import UserId


class DeleteUserService:
    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def delete(self, user_id: str) -> None:
        user = self._repository.get(UserId(value=user_id), "User not found")
        self._repository.delete(user)
