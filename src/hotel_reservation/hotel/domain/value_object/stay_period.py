from dataclasses import dataclass
from datetime import date, datetime

from hotel_reservation.shared.domain.exception import ValidationException


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(開始日 + 終了日)

    開始日と終了日が同じ日（日帰り）も有効とする。
    時刻付きの datetime は受け付けない。
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        for value in (self.start_date, self.end_date):
            if not isinstance(value, date):
                raise ValidationException("Start date and end date are required")
            if isinstance(value, datetime):
                raise ValidationException(
                    f"Expected a date without time, got datetime: {value}"
                )
        if self.start_date > self.end_date:
            raise ValidationException("End date must not be before start date")

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.end_date - self.start_date).days
