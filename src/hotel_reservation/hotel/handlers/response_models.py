from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.hotel.domain.entity import Hotel, Reservation, Room
from hotel_reservation.hotel.domain.value_object import HotelName


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_date: str
    start_date: str
    end_date: str
    nights: int
    room_count: int


class RoomData(BaseModel):
    """客室データのレスポンスモデル"""

    hotel_name: str
    room_number: int
    occupied: bool
    guest_name: str | None = None


class HotelData(BaseModel):
    """ホテルデータのレスポンスモデル"""

    hotel_name: str
    room_numbers: list[int]
    available: bool


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: ReservationData | RoomData | HotelData


def reservation_to_response(reservation: Reservation) -> dict:
    """Reservation をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=ReservationData(
            reservation_date=reservation.reservation_date.isoformat(),
            start_date=reservation.start_date.isoformat(),
            end_date=reservation.end_date.isoformat(),
            nights=reservation.nights(),
            room_count=reservation.room_count,
        )
    ).model_dump()


def room_to_response(hotel_name: HotelName, room: Room) -> dict:
    """Room をレスポンス辞書に変換する"""
    guest = room.current_guest
    return SuccessResponse(
        data=RoomData(
            hotel_name=str(hotel_name),
            room_number=room.number,
            occupied=guest is not None,
            guest_name=guest.name if guest is not None else None,
        )
    ).model_dump()


def hotel_to_response(hotel: Hotel) -> dict:
    """Hotel をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=HotelData(
            hotel_name=str(hotel.name),
            room_numbers=[room.number for room in hotel.rooms],
            available=hotel.available(),
        )
    ).model_dump()
