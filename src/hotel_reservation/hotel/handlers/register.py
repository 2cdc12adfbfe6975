from hotel_reservation.hotel.applications.register_hotel import RegisterHotelService
from hotel_reservation.hotel.domain.entity import HotelChain
from hotel_reservation.hotel.domain.factory import HotelDetails, HotelFactory
from hotel_reservation.hotel.handlers.request_models import RegisterHotelRequest
from hotel_reservation.hotel.handlers.response_models import hotel_to_response
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict, chain: HotelChain) -> dict:
    """ホテル登録ハンドラ"""
    logger.info("Received register hotel request")

    payload = event.get("Payload", event)
    request = RegisterHotelRequest.model_validate(payload)
    hotel_details: HotelDetails = {
        "hotel_name": request.hotel_name,
        "rooms": [
            {"number": room.number, "kind": room.kind, "cost": room.cost}
            for room in request.rooms
        ],
    }
    service = RegisterHotelService(chain=chain, factory=HotelFactory())
    hotel = service.register(hotel_details)

    logger.info(
        "Hotel registered",
        extra={"hotel_name": str(hotel.name), "room_count": hotel.room_count()},
    )
    return hotel_to_response(hotel)
