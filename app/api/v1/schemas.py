from pydantic import BaseModel

from app.application.dto.booking_payload import BookingPayload, CamelModel, PaginationPayload


class SlotSchema(BaseModel):
    time: str


class SlotListResponseSchema(BaseModel):
    status: str = "success"
    data: list[SlotSchema]


class AttendeeRequestSchema(CamelModel):
    name: str | None = None
    email: str | None = None
    time_zone: str | None = None


class CreateBookingRequestSchema(CamelModel):
    # Optional so that missing fields surface as 400 from booking validation.
    event_type_id: int | None = None
    start: str | None = None
    duration: int | None = None
    attendee: AttendeeRequestSchema | None = None


class BookingResponseSchema(BaseModel):
    status: str = "success"
    data: BookingPayload


class BookingListResponseSchema(BaseModel):
    status: str = "success"
    data: list[BookingPayload]
    pagination: PaginationPayload


class ErrorResponseSchema(BaseModel):
    status: str = "error"
    message: str
