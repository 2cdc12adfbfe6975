from hotel_reservation.hotel.domain.entity import Hotel, HotelChain
from hotel_reservation.hotel.domain.factory import HotelDetails, HotelFactory


class RegisterHotelService:
    """ホテル登録のユースケース"""

    def __init__(self, chain: HotelChain, factory: HotelFactory) -> None:
        self._chain = chain
        self._factory = factory

    def register(self, hotel_details: HotelDetails) -> Hotel:
        """ホテルを生成してチェーンに追加する"""

        hotel: Hotel = self._factory.create(hotel_details)
        self._chain.add_hotel(hotel)
        return hotel
