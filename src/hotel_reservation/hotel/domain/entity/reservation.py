from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from hotel_reservation.hotel.domain.value_object import StayPeriod
from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Reservation:
    """予約（作成後は不変）

    特定の客室やホテルへの参照は持たない。
    """

    stay_period: StayPeriod
    room_count: int
    reservation_date: date = field(default_factory=date.today)

    def __post_init__(self) -> None:
        if isinstance(self.room_count, bool) or not isinstance(self.room_count, int):
            raise ValidationException("Room count must be an integer")

    @property
    def start_date(self) -> date:
        return self.stay_period.start_date

    @property
    def end_date(self) -> date:
        return self.stay_period.end_date

    def nights(self) -> int:
        return self.stay_period.nights()

    @classmethod
    def create(cls, start_date: date, end_date: date, room_count: int) -> Reservation:
        """期間と客室数から予約を生成する（予約日は当日）"""
        return cls(
            stay_period=StayPeriod(start_date=start_date, end_date=end_date),
            room_count=room_count,
        )
