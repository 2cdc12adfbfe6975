from .room_kind import RoomKind as RoomKind
