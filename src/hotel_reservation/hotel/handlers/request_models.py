from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from hotel_reservation.shared.utils.validators import to_decimal


class RoomRequest(BaseModel):
    """客室のリクエストモデル"""

    number: int = Field(..., description="部屋番号", examples=[101])
    kind: str = Field(
        default="SINGLE",
        pattern="^(SINGLE|DOUBLE|SUITE)$",
        description="客室の種別",
    )
    cost: Decimal = Field(
        ...,
        gt=0,
        description="料金（0より大きい値）",
    )

    @field_validator("cost", mode="before")
    @classmethod
    def convert_cost_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


class RegisterHotelRequest(BaseModel):
    """ホテル登録リクエストモデル"""

    hotel_name: str = Field(..., min_length=1, max_length=100, description="ホテル名")
    rooms: list[RoomRequest] = Field(default_factory=list)


class ReserveRequest(BaseModel):
    """予約リクエストモデル"""

    hotel_name: str = Field(..., min_length=1, max_length=100)


class CheckInRequest(BaseModel):
    """チェックインリクエストモデル"""

    hotel_name: str = Field(..., min_length=1, max_length=100)
    room_number: int
    guest_name: str = Field(..., min_length=1, description="宿泊客の氏名")
    address: str | None = Field(default=None, description="宿泊客の住所")


class CheckOutRequest(BaseModel):
    """チェックアウトリクエストモデル"""

    hotel_name: str = Field(..., min_length=1, max_length=100)
    room_number: int
