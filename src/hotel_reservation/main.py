#!/usr/bin/env python3
import os

from hotel_reservation.hotel.domain.entity import Guest, Hotel, HotelChain, Room
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


def main() -> None:
    """ホテルを1件作成し、チェックインからチェックアウトまでを実行する"""
    hotel = Hotel(HotelName(os.getenv("HOTEL_NAME", "Pearl Continental")))
    room = Room(101)
    hotel.add_room(room)

    chain = HotelChain()
    chain.add_hotel(hotel)

    guest = Guest.create("Ali", "Lahore")

    chain.check_in_guest(room, guest)
    logger.info(
        "Room occupied",
        extra={"room_number": room.number, "occupied": room.is_occupied()},
    )

    chain.check_out_guest(room)
    logger.info(
        "Room released",
        extra={"room_number": room.number, "occupied": room.is_occupied()},
    )


if __name__ == "__main__":
    main()
