import threading

from hotel_reservation.hotel.domain.entity.guest import Guest
from hotel_reservation.hotel.domain.entity.hotel import Hotel
from hotel_reservation.hotel.domain.entity.reservation import Reservation
from hotel_reservation.hotel.domain.entity.room import Room
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.shared.domain import (
    ResourceNotFoundException,
    ValidationException,
)


class HotelChain:
    """ホテルチェーン

    ホテルの集合を所有し、予約・チェックイン・チェックアウトを
    各ホテル／客室へ委譲する。
    """

    def __init__(self) -> None:
        self._hotels: list[Hotel] = []
        self._lock = threading.Lock()

    @property
    def hotels(self) -> tuple[Hotel, ...]:
        with self._lock:
            return tuple(self._hotels)

    def add_hotel(self, hotel: Hotel) -> None:
        with self._lock:
            self._hotels.append(hotel)

    def find_hotel(self, name: HotelName) -> Hotel:
        """ホテル名で検索する"""
        for hotel in self.hotels:
            if hotel.name == name:
                return hotel
        raise ResourceNotFoundException(f"Hotel not found: {name}")

    def make_reservation(self, hotel: Hotel) -> Reservation:
        return hotel.create_reservation()

    def cancel_reservation(self, reservation: Reservation | None = None) -> None:
        """予約をキャンセルする

        キャンセル時の業務ルールは未定義のため、何もしない。
        """

    def check_in_guest(self, room: Room, guest: Guest) -> None:
        if not isinstance(guest, Guest):
            raise ValidationException("Guest required")
        room.assign_guest(guest)

    def check_out_guest(self, room: Room) -> None:
        room.assign_guest(None)
