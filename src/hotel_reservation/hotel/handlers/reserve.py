from hotel_reservation.hotel.applications.make_reservation import (
    MakeReservationService,
)
from hotel_reservation.hotel.domain.entity import HotelChain
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.hotel.handlers.request_models import ReserveRequest
from hotel_reservation.hotel.handlers.response_models import reservation_to_response
from hotel_reservation.shared.domain import IllegalStateException
from hotel_reservation.shared.utils.logger import get_logger

logger = get_logger()


def handler(event: dict, chain: HotelChain) -> dict:
    """予約ハンドラ"""
    logger.info("Received reserve request")

    payload = event.get("Payload", event)
    request = ReserveRequest.model_validate(payload)
    hotel_name = HotelName(request.hotel_name)
    service = MakeReservationService(chain=chain)
    try:
        reservation = service.reserve(hotel_name)
    except IllegalStateException:
        logger.warning("No rooms available", extra={"hotel_name": str(hotel_name)})
        raise

    logger.info(
        "Reservation created",
        extra={
            "hotel_name": str(hotel_name),
            "room_count": reservation.room_count,
        },
    )
    return reservation_to_response(reservation)
