from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.booking import Attendee, Booking
from app.domain.entities.pagination import PaginationInfo
from app.domain.entities.slot import Slot


class CalendarPort(ABC):
    @abstractmethod
    def find_available_slots(
        self,
        event_type_id: int,
        start_date: str,
        end_date: str,
        time_zone: str,
    ) -> list[Slot]:
        """Find free slots in [start_date, end_date)."""
        raise NotImplementedError

    @abstractmethod
    def create_booking(
        self,
        event_type_id: int,
        start: str,
        duration: int,
        attendee: Attendee,
    ) -> Booking:
        """Create a booking. Raises SchedulingError on rejection."""
        raise NotImplementedError

    @abstractmethod
    def get_booking(self, uid: str) -> Booking:
        """Fetch a booking. Raises SchedulingError if it cannot be found."""
        raise NotImplementedError

    @abstractmethod
    def list_bookings(
        self,
        take: int = 5,
        skip: int = 0,
        after_start: str | None = None,
        before_end: str | None = None,
    ) -> tuple[list[Booking], PaginationInfo]:
        raise NotImplementedError
