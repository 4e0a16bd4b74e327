from __future__ import annotations

import logging
from datetime import datetime

from app.application.exceptions import BadRequestError
from app.application.ports.calendar import CalendarPort
from app.application.use_cases.availability import AvailabilityResolver
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.list_bookings import BookingQueryUseCase
from app.application.utils.date_utils import parse_instant
from app.domain.entities.booking import Attendee, Booking
from app.domain.entities.pagination import PaginationInfo
from app.domain.entities.slot import Slot


class MockCalendar(CalendarPort):
    """Calendar provider simulated in-process on top of the scheduling use cases."""

    def __init__(
        self,
        resolver: AvailabilityResolver,
        booking_use_case: BookingUseCase,
        query: BookingQueryUseCase,
    ) -> None:
        self._resolver = resolver
        self._booking_use_case = booking_use_case
        self._query = query
        self._logger = logging.getLogger(__name__)

    def find_available_slots(
        self,
        event_type_id: int,
        start_date: str,
        end_date: str,
        time_zone: str,
    ) -> list[Slot]:
        return self._resolver.resolve(_parse(start_date), _parse(end_date), time_zone)

    def create_booking(
        self,
        event_type_id: int,
        start: str,
        duration: int,
        attendee: Attendee,
    ) -> Booking:
        result = self._booking_use_case.create(event_type_id, start, duration, attendee)
        if result.error is not None:
            raise result.error
        self._logger.info("Mock calendar booking created", extra={"uid": result.booking.uid})
        return result.booking

    def get_booking(self, uid: str) -> Booking:
        return self._query.get(uid)

    def list_bookings(
        self,
        take: int = 5,
        skip: int = 0,
        after_start: str | None = None,
        before_end: str | None = None,
    ) -> tuple[list[Booking], PaginationInfo]:
        return self._query.list(
            take,
            skip,
            _parse(after_start) if after_start else None,
            _parse(before_end) if before_end else None,
        )


def _parse(value: str) -> datetime:
    try:
        return parse_instant(value)
    except ValueError:
        raise BadRequestError(f"Invalid date: {value}")
