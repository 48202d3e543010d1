from abc import abstractmethod

from services.shared.domain import Repository, Role
from services.user.domain.entity import User
from services.user.domain.value_object import Email, UserId


class UserRepository(Repository[User, UserId]):
    """ユーザーレポジトリ

    メールアドレスの一意性は永続化層でも保証する。
    違反する書き込みは EmailAlreadyExistsException を送出する。
    """

    @abstractmethod
    def save(self, user: User) -> None:
        """新規ユーザーを永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User, previous_email: Email | None = None) -> None:
        """ユーザーを更新する（previous_email 指定時はメールの確保を付け替える）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, user: User) -> None:
        """ユーザーを削除し、メールアドレスを解放する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: Email) -> User | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, role: Role | None = None) -> list[User]:
        """ユーザー一覧（作成日時の新しい順、role 指定時は絞り込み）"""
        raise NotImplementedError
