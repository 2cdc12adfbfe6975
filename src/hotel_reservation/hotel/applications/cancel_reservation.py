from hotel_reservation.hotel.domain.entity import HotelChain, Reservation


class CancelReservationService:
    """予約キャンセルのユースケース"""

    def __init__(self, chain: HotelChain) -> None:
        self._chain = chain

    def cancel(self, reservation: Reservation) -> None:
        self._chain.cancel_reservation(reservation)
