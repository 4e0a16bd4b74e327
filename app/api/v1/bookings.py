from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from app.api.v1.responses import error_response, scheduling_error_response
from app.api.v1.schemas import (
    BookingListResponseSchema,
    BookingResponseSchema,
    CreateBookingRequestSchema,
)
from app.application.dto.booking_payload import BookingPayload, PaginationPayload
from app.application.exceptions import BookingNotFoundError
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.list_bookings import BookingQueryUseCase
from app.application.utils.date_utils import parse_instant
from app.core.config import settings
from app.domain.entities.booking import Attendee
from app.wiring.dependencies import get_booking_query, get_booking_use_case

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/bookings", status_code=201, response_model=BookingResponseSchema)
def create_booking(
    req: CreateBookingRequestSchema,
    uc: BookingUseCase = Depends(get_booking_use_case),
):
    logger.info("POST /api/bookings", extra={"start": req.start})

    attendee = None
    if req.attendee is not None:
        attendee = Attendee(
            name=req.attendee.name or "",
            email=req.attendee.email or "",
            time_zone=req.attendee.time_zone or "",
        )

    try:
        result = uc.create(req.event_type_id, req.start, req.duration, attendee)
    except Exception as e:
        logger.exception("Error creating booking", extra={"error": str(e)})
        return error_response(500, str(e) or "Unknown error")

    if result.error is not None:
        return scheduling_error_response(result.error)

    return BookingResponseSchema(data=BookingPayload.from_entity(result.booking))


@router.get("/api/bookings/list", response_model=BookingListResponseSchema)
def list_bookings(
    take: int = Query(settings.BOOKINGS_PER_PAGE),
    skip: int = Query(0),
    after_start: str | None = Query(None, alias="afterStart"),
    before_end: str | None = Query(None, alias="beforeEnd"),
    query: BookingQueryUseCase = Depends(get_booking_query),
):
    logger.info("GET /api/bookings/list", extra={"count": take})

    try:
        after = parse_instant(after_start) if after_start else None
        before = parse_instant(before_end) if before_end else None
    except ValueError:
        return error_response(400, "Invalid date filter: afterStart and beforeEnd must be ISO-8601")

    bookings, pagination = query.list(take, skip, after, before)
    return BookingListResponseSchema(
        data=[BookingPayload.from_entity(b) for b in bookings],
        pagination=PaginationPayload.from_entity(pagination),
    )


@router.get("/api/bookings/{uid}", response_model=BookingResponseSchema)
def get_booking(
    uid: str,
    query: BookingQueryUseCase = Depends(get_booking_query),
):
    logger.info("GET /api/bookings/{uid}", extra={"uid": uid})
    try:
        booking = query.get(uid)
    except BookingNotFoundError as e:
        return scheduling_error_response(e)
    return BookingResponseSchema(data=BookingPayload.from_entity(booking))
