from __future__ import annotations

from dataclasses import dataclass

from hotel_reservation.shared.domain import Identity, ValidationException


@dataclass(frozen=True)
class PayerIdentity:
    """予約者（支払者）"""

    id: Identity

    def __post_init__(self) -> None:
        if not isinstance(self.id, Identity):
            raise ValidationException("Identity required")

    @classmethod
    def create(cls, identity: Identity | None) -> PayerIdentity:
        """Identity から PayerIdentity を生成する"""
        if identity is None:
            raise ValidationException("Identity required")
        return cls(id=identity)
