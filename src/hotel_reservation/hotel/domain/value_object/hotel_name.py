from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class HotelName:
    """ホテル名"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value.strip()) == 0:
            raise ValidationException("Hotel name cannot be empty")
        if len(self.value) > 100:
            raise ValidationException("Hotel name is too long (max 100 characters)")

    def __str__(self) -> str:
        return self.value
