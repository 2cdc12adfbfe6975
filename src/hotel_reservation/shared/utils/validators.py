from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """リクエストの金額を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    bool や数値として解釈できない値は ValueError とし、
    Pydantic の ValidationError として呼び出し元へ返す。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError("Amount must be a number, not a boolean")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {v!r}") from e
