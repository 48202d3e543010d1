from services.shared.domain import Role
from services.shared.domain.exception import BusinessRuleViolationException
from services.shared.utils.clock import Clock, utc_now
from services.user.domain.entity import User
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.factory import UserFactory
from services.user.domain.repository import UserRepository
from services.user.domain.value_object import Email


class RegisterUserService:
    """利用者の新規登録ユースケース（ロールは常に User）"""

    def __init__(
        self,
        repository: UserRepository,
        factory: UserFactory,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._clock = clock

    def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> User:
        if password != confirm_password:
            raise BusinessRuleViolationException("Passwords do not match")

        if self._repository.find_by_email(Email(email)) is not None:
            raise EmailAlreadyExistsException()

        user = self._factory.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password,
                "role": Role.USER,
            },
            created_at=self._clock(),
        )
        self._repository.save(user)
        return user
