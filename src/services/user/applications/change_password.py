from services.shared.domain import CallerIdentity
from services.shared.domain.exception import AuthenticationException
from services.user.domain.repository import UserRepository
from services.user.domain.service import PasswordHasher, ensure_new_password
from services.user.domain.value_object import UserId


class ChangePasswordService:
    """ログイン中の利用者によるパスワード変更ユースケース"""

    def __init__(
        self, repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        self._repository = repository
        self._password_hasher = password_hasher

    def change(
        self,
        caller: CallerIdentity,
        current_password: str,
        new_password: str,
        confirm_new_password: str,
    ) -> None:
        if not caller.is_authenticated:
            raise AuthenticationException("Authentication required.")

        ensure_new_password(new_password, confirm_new_password)

        user = self._repository.get(UserId(value=caller.user_id), "User not found.")

        if not self._password_hasher.verify(user.password_hash, current_password):
            raise AuthenticationException("Invalid current password.")

        user.change_password_hash(self._password_hasher.hash(new_password))
        self._repository.update(user)
