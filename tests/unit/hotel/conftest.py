from decimal import Decimal

import pytest

from hotel_reservation.hotel.domain.entity import Hotel, Room, RoomCategory
from hotel_reservation.hotel.domain.enum import RoomKind
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.shared.domain import Money


@pytest.fixture
def create_hotel():
    """Hotel を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        hotel_name: str = "Pearl Continental",
        room_numbers: tuple[int, ...] = (101,),
        cost: Decimal = Decimal("15000"),
    ) -> Hotel:
        hotel = Hotel(HotelName(value=hotel_name))
        for number in room_numbers:
            hotel.add_room(
                Room(
                    number=number,
                    category=RoomCategory(kind=RoomKind.SINGLE, cost=Money(cost)),
                )
            )
        return hotel

    return _factory


@pytest.fixture
def registered_chain(chain, create_hotel):
    """Pearl Continental（101, 102号室）を登録済みの HotelChain"""
    chain.add_hotel(create_hotel(room_numbers=(101, 102)))
    return chain
