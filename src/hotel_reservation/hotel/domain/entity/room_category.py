from dataclasses import dataclass

from hotel_reservation.hotel.domain.enum import RoomKind
from hotel_reservation.shared.domain import Money, ValidationException


@dataclass(frozen=True)
class RoomCategory:
    """客室タイプ（種別 + 料金）"""

    kind: RoomKind
    cost: Money

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RoomKind) or not isinstance(self.cost, Money):
            raise ValidationException("Invalid room type")
