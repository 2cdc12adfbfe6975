from .exceptions import (
    DomainException,
    IllegalStateException,
    ResourceNotFoundException,
    RoomAlreadyOccupiedException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ValidationException",
    "IllegalStateException",
    "RoomAlreadyOccupiedException",
    "ResourceNotFoundException",
]
