from services.shared.domain import AggregateRoot, IsoDateTime, Role
from services.user.domain.value_object import Email, UserId


class User(AggregateRoot[UserId]):
    """利用者

    パスワードはハッシュ値のみ保持する。
    """

    def __init__(
        self,
        id: UserId,
        first_name: str,
        last_name: str,
        email: Email,
        password_hash: str,
        created_at: IsoDateTime,
        role: Role = Role.USER,
        profile_image: str | None = None,
    ) -> None:
        super().__init__(id)
        self._first_name = self._require(first_name, "first_name")
        self._last_name = self._require(last_name, "last_name")
        self._email = email
        self._password_hash = password_hash
        self._created_at = created_at
        self._role = role
        self._profile_image = profile_image

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> Email:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def role(self) -> Role:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == Role.ADMIN

    @property
    def profile_image(self) -> str | None:
        return self._profile_image

    def update_profile(
        self,
        first_name: str,
        last_name: str,
        email: Email,
        role: Role,
        profile_image: str | None = None,
    ) -> None:
        """プロフィールを更新する（profile_image は指定時のみ）"""
        self._first_name = self._require(first_name, "first_name")
        self._last_name = self._require(last_name, "last_name")
        self._email = email
        self._role = role
        if profile_image:
            self._profile_image = profile_image

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash

    @staticmethod
    def _require(value: str, field_name: str) -> str:
        if not value or not value.strip():
            raise ValueError(f"{field_name} cannot be empty")
        return value.strip()
