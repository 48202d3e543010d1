from dataclasses import dataclass

from services.shared.domain import CallerIdentity, Role
from services.shared.domain.exception import AuthorizationException
from services.shared.utils.clock import Clock, utc_now
from services.user.domain.entity import User
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.factory import UserFactory
from services.user.domain.repository import UserRepository
from services.user.domain.service import generate_temporary_password
from services.user.domain.value_object import Email


@dataclass(frozen=True)
class AddUserResult:
    user: User
    temporary_password: str | None = None


class AddUserService:
    """管理者によるユーザー追加ユースケース

    パスワード未指定の場合は仮パスワードを発行し、結果として一度だけ返す。
    """

    def __init__(
        self,
        repository: UserRepository,
        factory: UserFactory,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._clock = clock

    def add(
        self,
        caller: CallerIdentity,
        first_name: str,
        last_name: str,
        email: str,
        password: str | None = None,
        role: Role = Role.USER,
        profile_image: str | None = None,
    ) -> AddUserResult:
        if not caller.is_admin:
            raise AuthorizationException("Admin access required.")

        if self._repository.find_by_email(Email(email)) is not None:
            raise EmailAlreadyExistsException()

        temporary_password = None if password else generate_temporary_password()
        user = self._factory.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "email": email,
                "password": password or temporary_password,
                "role": role,
                "profile_image": profile_image,
            },
            created_at=self._clock(),
        )
        self._repository.save(user)
        return AddUserResult(user=user, temporary_password=temporary_password)
