from pydantic import Field

from services.shared.domain import Role
from services.shared.utils import CamelModel


class RegisterUserRequest(CamelModel):
    """利用者登録リクエストスキーマ"""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)


class AddUserRequest(CamelModel):
    """管理者によるユーザー追加リクエストスキーマ"""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str | None = None
    role: Role = Role.USER
    profile_image: str | None = None


class UpdateUserRequest(CamelModel):
    """ユーザー更新リクエストスキーマ"""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    role: Role = Role.USER
    profile_image: str | None = None


class ChangePasswordRequest(CamelModel):
    """パスワード変更リクエストスキーマ"""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)
    confirm_new_password: str = Field(..., min_length=1)

    model_config = {"str_strip_whitespace": False}
