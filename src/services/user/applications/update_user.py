from services.shared.domain import Role
from services.user.domain.entity import User
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email, UserId


class UpdateUserService:
    """ユーザー情報の更新ユースケース"""

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository

    def update(
        self,
        user_id: str,
        first_name: str,
        last_name: str,
        email: str,
        role: Role,
        profile_image: str | None = None,
    ) -> User:
        user = self._repository.get(UserId(value=user_id), "User not found")

        new_email = Email(email)
        if new_email != user.email:
            other = self._repository.find_by_email(new_email)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsException()

        previous_email = user.email
        user.update_profile(
            first_name=first_name,
            last_name=last_name,
            email=new_email,
            role=role,
            profile_image=profile_image,
        )
        self._repository.update(user, previous_email=previous_email)
        return user
