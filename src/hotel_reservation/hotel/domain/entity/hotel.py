import threading
from datetime import date, timedelta

from hotel_reservation.hotel.domain.entity.reservation import Reservation
from hotel_reservation.hotel.domain.entity.room import Room
from hotel_reservation.hotel.domain.event import ReservationCreated
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.shared.domain import (
    AggregateRoot,
    IllegalStateException,
    ResourceNotFoundException,
)


class Hotel(AggregateRoot[HotelName]):
    """ホテル集約（客室在庫を所有する）"""

    def __init__(self, name: HotelName) -> None:
        super().__init__(name)
        self._rooms: list[Room] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> HotelName:
        return self._id

    @property
    def rooms(self) -> tuple[Room, ...]:
        with self._lock:
            return tuple(self._rooms)

    def add_room(self, room: Room) -> None:
        """客室を追加する（部屋番号の重複は検査しない）"""
        with self._lock:
            self._rooms.append(room)

    def room_count(self) -> int:
        with self._lock:
            return len(self._rooms)

    def vacant_rooms(self) -> list[Room]:
        return [room for room in self.rooms if not room.is_occupied()]

    def available(self) -> bool:
        """空室が1室以上あるかどうか"""
        with self._lock:
            return self._has_vacancy()

    def _has_vacancy(self) -> bool:
        # 呼び出し側で self._lock を取得していること
        return any(not room.is_occupied() for room in self._rooms)

    def find_room(self, number: int) -> Room:
        """部屋番号で客室を検索する（重複時は先に追加された客室）"""
        for room in self.rooms:
            if room.number == number:
                return room
        raise ResourceNotFoundException(
            f"Room not found: {number} in {self.name}"
        )

    def create_reservation(self) -> Reservation:
        """本日から翌日までの予約を作成する

        客室の占有状態は変更しない（占有はチェックインで行う）。
        """
        with self._lock:
            if not self._has_vacancy():
                raise IllegalStateException("No rooms available")
            today = date.today()
            reservation = Reservation.create(
                start_date=today,
                end_date=today + timedelta(days=1),
                room_count=len(self._rooms),
            )
            self.add_domain_event(
                ReservationCreated(
                    hotel_name=self.name,
                    start_date=reservation.start_date,
                    end_date=reservation.end_date,
                    room_count=reservation.room_count,
                )
            )
        return reservation
