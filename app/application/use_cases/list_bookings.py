from __future__ import annotations

from datetime import datetime

from app.application.exceptions import BookingNotFoundError
from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking
from app.domain.entities.pagination import PaginationInfo


class BookingQueryUseCase:
    def __init__(self, store: BookingStorePort) -> None:
        self._store = store

    def list(
        self,
        take: int,
        skip: int = 0,
        after_start: datetime | None = None,
        before_end: datetime | None = None,
    ) -> tuple[list[Booking], PaginationInfo]:
        bookings = sorted(self._store.load().values(), key=lambda b: b.start)
        if after_start is not None:
            bookings = [b for b in bookings if b.start >= after_start]
        if before_end is not None:
            bookings = [b for b in bookings if b.start < before_end]

        total = len(bookings)
        if take <= 0 or skip < 0:
            return [], PaginationInfo.compute(total, take, skip, 0)

        page = bookings[skip : skip + take]
        return page, PaginationInfo.compute(total, take, skip, len(page))

    def get(self, uid: str) -> Booking:
        booking = self._store.get(uid)
        if booking is None:
            raise BookingNotFoundError("Booking not found")
        return booking
