class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException, ValueError):
    """値オブジェクト・エンティティの不変条件に違反した場合"""

    pass


class IllegalStateException(DomainException):
    """現在の状態では実行できない操作の場合"""

    pass


class RoomAlreadyOccupiedException(IllegalStateException):
    """使用中の客室にゲストを割り当てようとした場合"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass
