from __future__ import annotations

from services.shared.utils import CamelModel
from services.user.domain.entity import User


class UserData(CamelModel):
    """ユーザーデータのレスポンスモデル（パスワードハッシュは含めない）"""

    id: str
    first_name: str
    last_name: str
    full_name: str
    email: str
    role: str
    profile_image: str | None = None
    created_at: str


class SuccessResponse(CamelModel):
    """成功レスポンスモデル"""

    status: str = "success"
    message: str | None = None
    data: dict | list | None = None


def user_data(user: User) -> UserData:
    return UserData(
        id=str(user.id),
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=user.full_name,
        email=str(user.email),
        role=user.role.value,
        profile_image=user.profile_image,
        created_at=str(user.created_at),
    )


def to_response(user: User, message: str | None = None) -> dict:
    """User エンティティをレスポンス辞書に変換する"""
    return SuccessResponse(
        message=message, data=user_data(user).to_json_dict()
    ).model_dump(by_alias=True, mode="json", exclude_none=True)


def to_list_response(users: list[User]) -> dict:
    body = SuccessResponse(
        data=[user_data(user).to_json_dict() for user in users]
    ).model_dump(by_alias=True, mode="json", exclude_none=True)
    body["count"] = len(users)
    return body


def to_message_response(message: str) -> dict:
    return SuccessResponse(message=message).model_dump(
        by_alias=True, mode="json", exclude_none=True
    )
