from hotel_reservation.hotel.applications.check_out_guest import CheckOutGuestService
from hotel_reservation.hotel.domain.entity import HotelChain
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.hotel.handlers.request_models import CheckOutRequest
from hotel_reservation.hotel.handlers.response_models import room_to_response
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict, chain: HotelChain) -> dict:
    """チェックアウトハンドラ"""
    logger.info("Received check-out request")

    payload = event.get("Payload", event)
    request = CheckOutRequest.model_validate(payload)
    hotel_name = HotelName(request.hotel_name)
    room = CheckOutGuestService(chain=chain).check_out(hotel_name, request.room_number)

    logger.info(
        "Guest checked out",
        extra={"hotel_name": str(hotel_name), "room_number": room.number},
    )
    return room_to_response(hotel_name, room)
