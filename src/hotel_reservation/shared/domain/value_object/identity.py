from dataclasses import dataclass

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class Identity:
    """識別子（空文字・空白のみは不可）

    Value Object として不変性を保証。
    同じ値を持つ Identity は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationException("Identity cannot be empty")

    def __str__(self) -> str:
        return self.value
