from hotel_reservation.hotel.domain.entity import Guest, HotelChain, Room
from hotel_reservation.hotel.domain.value_object import HotelName


class CheckInGuestService:
    """チェックインのユースケース"""

    def __init__(self, chain: HotelChain) -> None:
        self._chain = chain

    def check_in(self, hotel_name: HotelName, room_number: int, guest: Guest) -> Room:
        """指定した客室にゲストをチェックインさせる"""
        room = self._chain.find_hotel(hotel_name).find_room(room_number)
        self._chain.check_in_guest(room, guest)
        return room
