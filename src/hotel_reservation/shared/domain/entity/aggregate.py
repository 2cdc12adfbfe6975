import threading
from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - ドメインイベントは flush されるまで保持する
    - イベントの追加と取り出しは同じロックで直列化する
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list = []
        self._events_lock = threading.Lock()

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        with self._events_lock:
            self._domain_events.append(event)

    def flush_domain_events(self) -> list:
        """保持しているドメインイベントを取り出す（取り出した分は破棄される）"""
        with self._events_lock:
            events, self._domain_events = self._domain_events, []
        return events
