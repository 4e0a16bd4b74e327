from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

BookingStatus = Literal["accepted", "pending", "cancelled"]
ALLOWED_DURATIONS = (30, 60)
DEFAULT_DURATION = 30


@dataclass(frozen=True)
class Attendee:
    name: str
    email: str
    time_zone: str


@dataclass(frozen=True)
class Booking:
    id: int
    uid: str
    title: str
    start: datetime  # aware, UTC
    end: datetime  # aware, UTC
    duration: int  # minutes
    status: BookingStatus = "accepted"
    attendees: tuple[Attendee, ...] = field(default_factory=tuple)


def booking_title(attendee_name: str) -> str:
    return f"Meeting with {attendee_name}"
