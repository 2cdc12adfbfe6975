from __future__ import annotations

from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Guest:
    """宿泊客"""

    name: str
    address_details: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationException("Guest name required")

    @classmethod
    def create(cls, name: str, address: str | None = None) -> Guest:
        """氏名と住所から Guest を生成する"""
        return cls(name=name, address_details=address)
