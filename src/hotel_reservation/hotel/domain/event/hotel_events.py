from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from hotel_reservation.hotel.domain.value_object import HotelName


@dataclass(frozen=True)
class ReservationCreated:
    """予約が作成されたことを表すドメインイベント"""

    hotel_name: HotelName
    start_date: date
    end_date: date
    room_count: int
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
