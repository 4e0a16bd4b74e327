from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.application.exceptions import (
    BadRequestError,
    OutOfHoursError,
    SchedulingError,
    SlotTakenError,
)
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.offset_provider import OffsetProviderPort
from app.application.utils.date_utils import parse_instant, to_iso
from app.domain.entities.booking import (
    ALLOWED_DURATIONS,
    DEFAULT_DURATION,
    Attendee,
    Booking,
    booking_title,
)
from app.domain.entities.business_hours import BusinessHours

MAX_BOOKING_ID = 100000


@dataclass(frozen=True)
class BookingResult:
    booking: Booking | None = None
    error: SchedulingError | None = None

    @property
    def ok(self) -> bool:
        return self.booking is not None


class BookingUseCase:
    def __init__(
        self,
        store: BookingStorePort,
        offsets: OffsetProviderPort,
        business_hours: BusinessHours,
        rng: random.Random | None = None,
    ) -> None:
        self._store = store
        self._offsets = offsets
        self._business_hours = business_hours
        self._rng = rng or random.Random()
        self._logger = logging.getLogger(__name__)

    def create(
        self,
        event_type_id: int | None,
        start: str | None,
        duration: int | None,
        attendee: Attendee | None,
    ) -> BookingResult:
        """
        Validate and persist a booking.
        Validation and conflict failures come back as BookingResult.error;
        storage write failures propagate.
        """
        try:
            start_at, duration_minutes = self._validate_request(event_type_id, start, duration, attendee)
            self._check_business_hours(start_at, attendee)
        except SchedulingError as e:
            self._logger.info("Booking rejected", extra={"start": start, "reason": e.kind, "error": str(e)})
            return BookingResult(error=e)

        with self._store.lock:
            bookings = self._store.load()
            if any(b.start == start_at for b in bookings.values()):
                error = SlotTakenError("This time slot is already booked")
                self._logger.info("Booking rejected", extra={"start": start, "reason": error.kind})
                return BookingResult(error=error)

            booking = self._build_booking(start_at, duration_minutes, attendee)
            while booking.uid in bookings:
                booking = self._build_booking(start_at, duration_minutes, attendee)
            bookings[booking.uid] = booking
            self._store.save(bookings)

        self._logger.info(
            "Booking created",
            extra={"uid": booking.uid, "start": to_iso(booking.start), "time_zone": attendee.time_zone},
        )
        return BookingResult(booking=booking)

    def _validate_request(
        self,
        event_type_id: int | None,
        start: str | None,
        duration: int | None,
        attendee: Attendee | None,
    ) -> tuple[datetime, int]:
        if not event_type_id or not start or attendee is None:
            raise BadRequestError("Missing required fields: eventTypeId, start, attendee")
        if not attendee.name or not attendee.email or not attendee.time_zone:
            raise BadRequestError("Attendee must have name, email, and timeZone")

        try:
            start_at = parse_instant(start)
        except ValueError:
            raise BadRequestError(f"Invalid start time: {start}")

        duration_minutes = DEFAULT_DURATION if duration is None else duration
        if duration_minutes not in ALLOWED_DURATIONS:
            raise BadRequestError(f"Duration must be one of {', '.join(str(d) for d in ALLOWED_DURATIONS)} minutes")

        return start_at, duration_minutes

    def _check_business_hours(self, start_at: datetime, attendee: Attendee) -> None:
        offset = self._offsets.offset_hours(attendee.time_zone)
        local_hour = (start_at + timedelta(hours=offset)).hour
        if not self._business_hours.contains_hour(local_hour):
            raise OutOfHoursError(
                f"Bookings are only available between {self._business_hours.start}:00 "
                f"and {self._business_hours.end}:00"
            )

    def _build_booking(self, start_at: datetime, duration: int, attendee: Attendee) -> Booking:
        booking_id = self._rng.randrange(MAX_BOOKING_ID)
        uid = f"booking_{int(time.time() * 1000)}_{booking_id}"
        return Booking(
            id=booking_id,
            uid=uid,
            title=booking_title(attendee.name),
            start=start_at,
            end=start_at + timedelta(minutes=duration),
            duration=duration,
            status="accepted",
            attendees=(attendee,),
        )
