from .hotel_events import ReservationCreated as ReservationCreated
