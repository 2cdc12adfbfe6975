import threading

from hotel_reservation.hotel.domain.entity.guest import Guest
from hotel_reservation.hotel.domain.entity.room_category import RoomCategory
from hotel_reservation.shared.domain import (
    Entity,
    RoomAlreadyOccupiedException,
    ValidationException,
)


class Room(Entity[int]):
    """客室エンティティ

    空室 / 使用中の2状態を持つ。
    占有状態の確認と更新は客室ごとのロック内で行う。
    """

    def __init__(self, number: int, category: RoomCategory | None = None) -> None:
        if isinstance(number, bool) or not isinstance(number, int):
            raise ValidationException("Room number must be an integer")
        if category is not None and not isinstance(category, RoomCategory):
            raise ValidationException("Invalid room type")
        super().__init__(number)
        self._category = category
        self._current_guest: Guest | None = None
        self._lock = threading.Lock()

    @property
    def number(self) -> int:
        return self._id

    @property
    def category(self) -> RoomCategory | None:
        return self._category

    @property
    def current_guest(self) -> Guest | None:
        return self._current_guest

    def is_occupied(self) -> bool:
        """使用中かどうか"""
        return self._current_guest is not None

    def assign_guest(self, guest: Guest | None) -> None:
        """ゲストを割り当てる（None の場合はチェックアウト）

        使用中の客室への割り当ては RoomAlreadyOccupiedException とする。
        """
        if guest is not None and not isinstance(guest, Guest):
            raise ValidationException("Guest required")
        with self._lock:
            if guest is None:
                self._current_guest = None
                return
            if self._current_guest is not None:
                raise RoomAlreadyOccupiedException(
                    f"Room {self.number} is already occupied"
                )
            self._current_guest = guest
