from .hotel_name import HotelName
from .stay_period import StayPeriod

__all__ = ["HotelName", "StayPeriod"]
