import secrets
import string

from services.shared.domain.exception import BusinessRuleViolationException

MIN_PASSWORD_LENGTH = 6
TEMPORARY_PASSWORD_LENGTH = 12
_TEMPORARY_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def ensure_new_password(new_password: str, confirm_password: str) -> None:
    """新しいパスワードが確認用と一致し、最低文字数を満たすか検証する"""
    if new_password != confirm_password:
        raise BusinessRuleViolationException("New passwords do not match.")
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise BusinessRuleViolationException(
            f"New password must be at least {MIN_PASSWORD_LENGTH} characters long."
        )


def generate_temporary_password() -> str:
    """管理者によるユーザー追加時の仮パスワード"""
    return "".join(
        secrets.choice(_TEMPORARY_PASSWORD_ALPHABET)
        for _ in range(TEMPORARY_PASSWORD_LENGTH)
    )
