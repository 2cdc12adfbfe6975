from .hotel_factory import HotelDetails, HotelFactory, RoomDetails

__all__ = ["HotelDetails", "HotelFactory", "RoomDetails"]
