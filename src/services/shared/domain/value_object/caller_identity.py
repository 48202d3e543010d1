from __future__ import annotations

from dataclasses import dataclass

from .role import Role


@dataclass(frozen=True)
class CallerIdentity:
    """API 呼び出し元の識別情報

    Lambda Authorizer が requestContext.authorizer に設定した
    user_id / role から生成する。user_id が無い場合はゲスト扱い。
    """

    user_id: str | None = None
    role: Role = Role.USER

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.role == Role.ADMIN

    @classmethod
    def anonymous(cls) -> CallerIdentity:
        return cls()

    @classmethod
    def from_authorizer_context(cls, context: dict | None) -> CallerIdentity:
        """Authorizer コンテキストから生成する（未知のロールは User として扱う）"""
        if not context:
            return cls.anonymous()
        user_id = context.get("user_id") or None
        try:
            role = Role(context.get("role", Role.USER.value))
        except ValueError:
            role = Role.USER
        return cls(user_id=user_id, role=role)
