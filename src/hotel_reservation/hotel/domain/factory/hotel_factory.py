from decimal import Decimal
from typing import TypedDict

from hotel_reservation.hotel.domain.entity.hotel import Hotel
from hotel_reservation.hotel.domain.entity.room import Room
from hotel_reservation.hotel.domain.entity.room_category import RoomCategory
from hotel_reservation.hotel.domain.enum.room_kind import RoomKind
from hotel_reservation.hotel.domain.value_object.hotel_name import HotelName
from hotel_reservation.shared.domain.exception import ValidationException
from hotel_reservation.shared.domain.value_object.money import Money


class RoomDetails(TypedDict):
    """客室の入力データ"""

    number: int
    kind: str
    cost: Decimal


class HotelDetails(TypedDict):
    """ホテルの入力データ"""

    hotel_name: str
    rooms: list[RoomDetails]


class HotelFactory:
    """客室在庫付きのホテルを生成するFactory"""

    def create(self, hotel_details: HotelDetails) -> Hotel:
        """新規ホテルのエンティティを作成する"""

        hotel = Hotel(name=HotelName(hotel_details["hotel_name"]))
        for room_details in hotel_details["rooms"]:
            hotel.add_room(self.create_room(room_details))
        return hotel

    def create_room(self, room_details: RoomDetails) -> Room:
        """客室のエンティティを作成する"""
        try:
            kind = RoomKind(room_details["kind"])
        except ValueError as e:
            raise ValidationException(
                f"Unsupported room kind: {room_details['kind']}"
            ) from e

        category = RoomCategory(kind=kind, cost=Money(amount=room_details["cost"]))
        return Room(number=room_details["number"], category=category)
