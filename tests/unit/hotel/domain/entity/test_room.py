import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from hotel_reservation.hotel.domain.entity import Guest, Room
from hotel_reservation.shared.domain import (
    IllegalStateException,
    RoomAlreadyOccupiedException,
    ValidationException,
)


class TestRoom:
    def test_new_room_is_vacant(self):
        room = Room(101)
        assert room.is_occupied() is False
        assert room.current_guest is None

    def test_room_is_occupied_after_guest_assigned(self, guest):
        room = Room(1)
        room.assign_guest(guest)
        assert room.is_occupied() is True
        assert room.current_guest == guest

    def test_room_is_vacant_after_guest_cleared(self, guest):
        room = Room(1)
        room.assign_guest(guest)
        room.assign_guest(None)
        assert room.is_occupied() is False

    def test_clearing_vacant_room_is_noop(self):
        room = Room(1)
        room.assign_guest(None)
        assert room.is_occupied() is False

    def test_assigning_occupied_room_raises_error(self, guest):
        room = Room(1)
        room.assign_guest(guest)
        with pytest.raises(RoomAlreadyOccupiedException, match="already occupied"):
            room.assign_guest(Guest.create("Sara", "Karachi"))
        assert room.current_guest == guest

    def test_occupied_error_is_illegal_state(self, guest):
        room = Room(1)
        room.assign_guest(guest)
        with pytest.raises(IllegalStateException):
            room.assign_guest(guest)

    def test_room_can_be_reoccupied_after_checkout(self, guest):
        room = Room(1)
        room.assign_guest(guest)
        room.assign_guest(None)
        other = Guest.create("Sara", "Karachi")
        room.assign_guest(other)
        assert room.current_guest == other

    @pytest.mark.parametrize("number", ["101", 101.0, True, None])
    def test_non_integer_number_raises_error(self, number):
        with pytest.raises(ValidationException, match="Room number must be an integer"):
            Room(number)

    def test_invalid_category_raises_error(self):
        with pytest.raises(ValidationException, match="Invalid room type"):
            Room(101, category="SUITE")

    def test_assigning_non_guest_raises_error(self):
        room = Room(101)
        with pytest.raises(ValidationException, match="Guest required"):
            room.assign_guest("Ali")
        assert room.is_occupied() is False

    def test_room_equality_by_number(self):
        assert Room(101) == Room(101)
        assert Room(101) != Room(102)

    def test_only_one_concurrent_check_in_wins(self):
        room = Room(101)
        workers = 16
        barrier = threading.Barrier(workers)

        def _check_in(i: int) -> bool:
            barrier.wait()
            try:
                room.assign_guest(Guest.create(f"guest-{i}"))
            except RoomAlreadyOccupiedException:
                return False
            return True

        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(_check_in, range(workers)))

        assert results.count(True) == 1
        assert room.is_occupied() is True
