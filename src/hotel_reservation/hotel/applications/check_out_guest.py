from hotel_reservation.hotel.domain.entity import HotelChain, Room
from hotel_reservation.hotel.domain.value_object import HotelName


class CheckOutGuestService:
    """チェックアウトのユースケース"""

    def __init__(self, chain: HotelChain) -> None:
        self._chain = chain

    def check_out(self, hotel_name: HotelName, room_number: int) -> Room:
        """指定した客室からゲストをチェックアウトさせる"""
        room = self._chain.find_hotel(hotel_name).find_room(room_number)
        self._chain.check_out_guest(room)
        return room
