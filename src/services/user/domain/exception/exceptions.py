from services.shared.domain.exception import DuplicateResourceException


class EmailAlreadyExistsException(DuplicateResourceException):
    """メールアドレスが他のユーザーに使用されている場合"""

    def __init__(self, message: str = "Email already exists") -> None:
        super().__init__(message)
