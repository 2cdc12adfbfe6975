from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Money:
    """金額（0より大きい値）

    int / float は Decimal へ正確に変換するため、元の値と等しいまま保持される。
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool):
            raise ValidationException("Amount must be a number")
        if isinstance(self.amount, (Decimal, int, float)):
            amount = Decimal(self.amount)
        else:
            try:
                amount = Decimal(str(self.amount))
            except InvalidOperation as e:
                raise ValidationException(f"Invalid amount: {self.amount}") from e
        if not amount.is_finite() or amount <= 0:
            raise ValidationException("Amount must be positive")
        object.__setattr__(self, "amount", amount)

    def __str__(self) -> str:
        return str(self.amount)

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        return Money(amount=self.amount + other.amount)
