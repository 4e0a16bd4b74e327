from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from app.api.v1.responses import error_response
from app.api.v1.schemas import SlotListResponseSchema, SlotSchema
from app.application.use_cases.availability import AvailabilityResolver
from app.application.utils.date_utils import parse_instant, to_iso
from app.wiring.dependencies import get_availability_resolver

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/slots", response_model=SlotListResponseSchema)
def list_slots(
    event_type_id: str | None = Query(None, alias="eventTypeId"),
    start: str | None = Query(None),
    end: str | None = Query(None),
    time_zone: str = Query("UTC", alias="timeZone"),
    resolver: AvailabilityResolver = Depends(get_availability_resolver),
):
    logger.info("GET /api/slots", extra={"start": start, "time_zone": time_zone})

    if not event_type_id or not start or not end:
        return error_response(400, "Missing required parameters: eventTypeId, start, end")

    try:
        range_start = parse_instant(start)
        range_end = parse_instant(end)
    except ValueError:
        return error_response(400, "Invalid date range: start and end must be ISO-8601 dates")

    try:
        slots = resolver.resolve(range_start, range_end, time_zone)
    except Exception as e:
        logger.exception("Error resolving slots", extra={"error": str(e)})
        return error_response(500, str(e) or "Unknown error")

    return SlotListResponseSchema(data=[SlotSchema(time=to_iso(s.time)) for s in slots])
