from .entity import (
    Guest,
    Hotel,
    HotelChain,
    PayerIdentity,
    Reservation,
    Room,
    RoomCategory,
)
from .enum import RoomKind
from .event import ReservationCreated
from .factory import HotelDetails, HotelFactory, RoomDetails
from .value_object import HotelName, StayPeriod

__all__ = [
    "Guest",
    "Hotel",
    "HotelChain",
    "HotelDetails",
    "HotelFactory",
    "HotelName",
    "PayerIdentity",
    "Reservation",
    "ReservationCreated",
    "Room",
    "RoomCategory",
    "RoomDetails",
    "RoomKind",
    "StayPeriod",
]
