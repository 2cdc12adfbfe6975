from .guest import Guest
from .hotel import Hotel
from .hotel_chain import HotelChain
from .payer_identity import PayerIdentity
from .reservation import Reservation
from .room import Room
from .room_category import RoomCategory

__all__ = [
    "Guest",
    "Hotel",
    "HotelChain",
    "PayerIdentity",
    "Reservation",
    "Room",
    "RoomCategory",
]
