from __future__ import annotations

import threading

from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking


class MemoryBookingStore(BookingStorePort):
    def __init__(self, bookings: dict[str, Booking] | None = None) -> None:
        self._bookings: dict[str, Booking] = dict(bookings or {})
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def load(self) -> dict[str, Booking]:
        with self._lock:
            return dict(self._bookings)

    def save(self, bookings: dict[str, Booking]) -> None:
        with self._lock:
            self._bookings = dict(bookings)

    def get(self, uid: str) -> Booking | None:
        return self._bookings.get(uid)

    def clear(self) -> None:
        self.save({})
