import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date, timedelta

import pytest

from hotel_reservation.hotel.domain.entity import Hotel, Room
from hotel_reservation.hotel.domain.event import ReservationCreated
from hotel_reservation.hotel.domain.value_object import HotelName
from hotel_reservation.shared.domain import (
    IllegalStateException,
    ResourceNotFoundException,
    ValidationException,
)


class TestHotel:
    def test_blank_hotel_name_raises_error(self):
        with pytest.raises(ValidationException):
            Hotel(HotelName(value=" "))

    def test_hotel_without_rooms_is_not_available(self, create_hotel):
        hotel = create_hotel(room_numbers=())
        assert hotel.available() is False

    def test_hotel_with_vacant_room_is_available(self, create_hotel):
        hotel = create_hotel(room_numbers=(101,))
        assert hotel.available() is True

    def test_hotel_with_all_rooms_occupied_is_not_available(
        self, create_hotel, guest
    ):
        hotel = create_hotel(room_numbers=(101, 102))
        for room in hotel.rooms:
            room.assign_guest(guest)
        assert hotel.available() is False
        assert hotel.vacant_rooms() == []

    def test_vacant_rooms(self, create_hotel, guest):
        hotel = create_hotel(room_numbers=(101, 102))
        hotel.find_room(101).assign_guest(guest)
        assert [room.number for room in hotel.vacant_rooms()] == [102]

    def test_rooms_keep_insertion_order(self, create_hotel):
        hotel = create_hotel(room_numbers=(103, 101, 102))
        assert [room.number for room in hotel.rooms] == [103, 101, 102]
        assert hotel.room_count() == 3

    def test_add_room_allows_duplicate_numbers(self, create_hotel):
        hotel = create_hotel(room_numbers=(101,))
        hotel.add_room(Room(101))
        assert hotel.room_count() == 2

    def test_find_room_not_found(self, create_hotel):
        hotel = create_hotel(room_numbers=(101,))
        with pytest.raises(ResourceNotFoundException, match="Room not found"):
            hotel.find_room(999)

    def test_create_reservation(self, create_hotel):
        hotel = create_hotel(room_numbers=(101, 102, 103))
        reservation = hotel.create_reservation()
        assert reservation.start_date <= reservation.end_date
        assert reservation.end_date - reservation.start_date == timedelta(days=1)
        assert reservation.start_date == date.today()
        assert reservation.room_count == 3

    def test_create_reservation_does_not_occupy_rooms(self, create_hotel):
        hotel = create_hotel(room_numbers=(101,))
        hotel.create_reservation()
        assert hotel.find_room(101).is_occupied() is False

    def test_create_reservation_without_vacancy_raises_error(
        self, create_hotel, guest
    ):
        hotel = create_hotel(room_numbers=(101,))
        hotel.find_room(101).assign_guest(guest)
        with pytest.raises(IllegalStateException, match="No rooms available"):
            hotel.create_reservation()

    def test_create_reservation_without_rooms_raises_error(self, create_hotel):
        hotel = create_hotel(room_numbers=())
        with pytest.raises(IllegalStateException):
            hotel.create_reservation()

    def test_create_reservation_records_domain_event(self, create_hotel):
        hotel = create_hotel(room_numbers=(101, 102))
        hotel.create_reservation()

        events = hotel.flush_domain_events()

        assert len(events) == 1
        assert isinstance(events[0], ReservationCreated)
        assert events[0].hotel_name == HotelName(value="Pearl Continental")
        assert events[0].room_count == 2
        assert hotel.flush_domain_events() == []

    def test_hotel_equality_by_name(self, create_hotel):
        assert create_hotel(room_numbers=()) == create_hotel(room_numbers=(101,))

    def test_concurrent_reservations_and_flushes_keep_every_event(self, create_hotel):
        hotel = create_hotel(room_numbers=(101,))
        reservations_per_worker = 200
        workers = 4
        done = threading.Event()
        flushed: list = []

        def _reserve() -> None:
            for _ in range(reservations_per_worker):
                hotel.create_reservation()

        def _drain() -> None:
            while not done.is_set():
                flushed.extend(hotel.flush_domain_events())

        drainer = threading.Thread(target=_drain)
        drainer.start()
        with ThreadPoolExecutor(max_workers=workers) as executor:
            for future in [executor.submit(_reserve) for _ in range(workers)]:
                future.result()
        done.set()
        drainer.join()
        flushed.extend(hotel.flush_domain_events())

        assert len(flushed) == reservations_per_worker * workers
        assert all(isinstance(event, ReservationCreated) for event in flushed)
