from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from app.application.exceptions import SchedulingError
from app.application.ports.calendar import CalendarPort
from app.application.utils.date_utils import format_time_in_zone, to_iso
from app.domain.entities.booking import DEFAULT_DURATION, Attendee, Booking
from app.domain.entities.slot import TimeSlot

USER_BOOKINGS_PAGE_SIZE = 5


@dataclass(frozen=True)
class AppointmentResult:
    success: bool
    booking: Booking | None = None
    error: str | None = None


class SchedulerUseCase:
    """Visitor-facing flow: show a day's slots, book one, look bookings up."""

    def __init__(self, calendar: CalendarPort, event_type_id: int) -> None:
        self._calendar = calendar
        self._event_type_id = event_type_id
        self._logger = logging.getLogger(__name__)

    def get_available_slots(self, selected_date: date, user_time_zone: str) -> list[TimeSlot]:
        start_date = selected_date.isoformat()
        end_date = (selected_date + timedelta(days=1)).isoformat()
        slots = self._calendar.find_available_slots(self._event_type_id, start_date, end_date, user_time_zone)

        time_slots: list[TimeSlot] = []
        for index, slot in enumerate(slots):
            start_utc = to_iso(slot.time)
            time_slots.append(
                TimeSlot(
                    id=f"slot-{index}-{start_utc}",
                    start_utc=start_utc,
                    display_time=format_time_in_zone(slot.time, user_time_zone),
                    available=True,
                )
            )
        return time_slots

    def book_appointment(
        self,
        slot: TimeSlot,
        name: str,
        email: str,
        time_zone: str,
        duration: int = DEFAULT_DURATION,
    ) -> AppointmentResult:
        try:
            booking = self._calendar.create_booking(
                self._event_type_id,
                slot.start_utc,
                duration,
                Attendee(name=name, email=email, time_zone=time_zone),
            )
        except SchedulingError as e:
            return AppointmentResult(success=False, error=str(e) or "Booking failed")
        return AppointmentResult(success=True, booking=booking)

    def get_booking_details(self, uid: str) -> AppointmentResult:
        try:
            booking = self._calendar.get_booking(uid)
        except SchedulingError as e:
            return AppointmentResult(success=False, error=str(e) or "Failed to fetch booking")
        return AppointmentResult(success=True, booking=booking)

    def get_user_bookings(
        self,
        after_start: str | None = None,
        before_end: str | None = None,
    ) -> list[Booking]:
        try:
            bookings, _ = self._calendar.list_bookings(
                take=USER_BOOKINGS_PAGE_SIZE,
                skip=0,
                after_start=after_start,
                before_end=before_end,
            )
        except SchedulingError as e:
            self._logger.error("Failed to fetch bookings", extra={"error": str(e)})
            return []
        return bookings
