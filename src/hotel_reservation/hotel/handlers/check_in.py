from hotel_reservation.hotel.applications.check_in_guest import CheckInGuestService
from hotel_reservation.hotel.domain.entity import Guest, HotelChain
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.hotel.handlers.request_models import CheckInRequest
from hotel_reservation.hotel.handlers.response_models import room_to_response
from hotel_reservation.shared.domain import RoomAlreadyOccupiedException
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict, chain: HotelChain) -> dict:
    """チェックインハンドラ"""
    logger.info("Received check-in request")

    payload = event.get("Payload", event)
    request = CheckInRequest.model_validate(payload)
    hotel_name = HotelName(request.hotel_name)
    guest = Guest.create(request.guest_name, request.address)
    service = CheckInGuestService(chain=chain)
    try:
        room = service.check_in(hotel_name, request.room_number, guest)
    except RoomAlreadyOccupiedException:
        logger.warning(
            "Room is already occupied",
            extra={"hotel_name": str(hotel_name), "room_number": request.room_number},
        )
        raise

    logger.info(
        "Guest checked in",
        extra={"hotel_name": str(hotel_name), "room_number": room.number},
    )
    return room_to_response(hotel_name, room)
