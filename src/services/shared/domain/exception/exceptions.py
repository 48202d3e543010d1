class DomainException(Exception):
    """ドメイン層で発生する基底例外（メッセージはそのまま API に返す）"""


class ResourceNotFoundException(DomainException):
    """予約・フライト・ユーザーが存在しない"""


class BusinessRuleViolationException(DomainException):
    """業務ルール違反（出発済み、キャンセル済みなど）"""


class DuplicateResourceException(DomainException):
    """一意であるべき値の重複（座席・予約番号・メールアドレス）"""


class OptimisticLockException(DomainException):
    """更新中に予約のステータスが変わっていた"""


class AuthenticationException(DomainException):
    """未ログイン、または現在のパスワードが誤っている"""


class AuthorizationException(DomainException):
    """管理者権限が必要な操作"""
