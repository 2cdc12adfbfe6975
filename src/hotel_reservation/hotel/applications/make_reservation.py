from hotel_reservation.hotel.domain.entity import HotelChain, Reservation
from hotel_reservation.hotel.domain.value_object import HotelName


class MakeReservationService:
    """予約作成のユースケース"""

    def __init__(self, chain: HotelChain) -> None:
        self._chain = chain

    def reserve(self, hotel_name: HotelName) -> Reservation:
        """ホテルを予約する"""
        hotel = self._chain.find_hotel(hotel_name)
        return self._chain.make_reservation(hotel)
