from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.utils.date_utils import parse_instant, to_iso
from app.domain.entities.booking import Attendee, Booking, BookingStatus
from app.domain.entities.pagination import PaginationInfo


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttendeePayload(CamelModel):
    name: str
    email: str
    time_zone: str


class BookingPayload(CamelModel):
    """Booking as stored on disk and exchanged over the API."""

    id: int
    uid: str
    title: str
    start: str
    end: str
    duration: int
    status: BookingStatus = "accepted"
    attendees: list[AttendeePayload] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingPayload:
        return cls(
            id=booking.id,
            uid=booking.uid,
            title=booking.title,
            start=to_iso(booking.start),
            end=to_iso(booking.end),
            duration=booking.duration,
            status=booking.status,
            attendees=[
                AttendeePayload(name=a.name, email=a.email, time_zone=a.time_zone)
                for a in booking.attendees
            ],
        )

    def to_entity(self) -> Booking:
        return Booking(
            id=self.id,
            uid=self.uid,
            title=self.title,
            start=parse_instant(self.start),
            end=parse_instant(self.end),
            duration=self.duration,
            status=self.status,
            attendees=tuple(
                Attendee(name=a.name, email=a.email, time_zone=a.time_zone) for a in self.attendees
            ),
        )


class PaginationPayload(CamelModel):
    total_items: int
    remaining_items: int
    returned_items: int
    items_per_page: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_entity(cls, info: PaginationInfo) -> PaginationPayload:
        return cls(
            total_items=info.total_items,
            remaining_items=info.remaining_items,
            returned_items=info.returned_items,
            items_per_page=info.items_per_page,
            current_page=info.current_page,
            total_pages=info.total_pages,
            has_next_page=info.has_next_page,
            has_previous_page=info.has_previous_page,
        )

    def to_entity(self) -> PaginationInfo:
        return PaginationInfo(
            total_items=self.total_items,
            remaining_items=self.remaining_items,
            returned_items=self.returned_items,
            items_per_page=self.items_per_page,
            current_page=self.current_page,
            total_pages=self.total_pages,
            has_next_page=self.has_next_page,
            has_previous_page=self.has_previous_page,
        )
