from enum import Enum


class RoomKind(str, Enum):
    """客室の種別"""

    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    SUITE = "SUITE"
