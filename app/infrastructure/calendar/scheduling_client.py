from __future__ import annotations

import logging
from typing import Any

import httpx

from app.application.dto.booking_payload import BookingPayload, PaginationPayload
from app.application.exceptions import SchedulingApiError
from app.application.ports.calendar import CalendarPort
from app.application.utils.date_utils import parse_instant
from app.core.config import settings
from app.domain.entities.booking import Attendee, Booking
from app.domain.entities.pagination import PaginationInfo
from app.domain.entities.slot import Slot


class SchedulingApiClient(CalendarPort):
    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._client = client or httpx.Client(base_url=self._base_url, timeout=10.0)
        self._headers = {"Content-Type": "application/json"}
        self._logger = logging.getLogger(__name__)

    def find_available_slots(
        self,
        event_type_id: int,
        start_date: str,
        end_date: str,
        time_zone: str,
    ) -> list[Slot]:
        params = {
            "eventTypeId": str(event_type_id),
            "start": start_date,
            "end": end_date,
            "timeZone": time_zone,
        }
        response = self._send("GET", "/api/slots", params=params)
        data = self._json_or_raise(response, "API error")

        slots: list[Slot] = []
        for item in data.get("data", []):
            try:
                slots.append(Slot(time=parse_instant(item["time"])))
            except (KeyError, TypeError, ValueError):
                continue
        return slots

    def create_booking(
        self,
        event_type_id: int,
        start: str,
        duration: int,
        attendee: Attendee,
    ) -> Booking:
        payload = {
            "eventTypeId": event_type_id,
            "start": start,
            "duration": duration,
            "attendee": {
                "name": attendee.name,
                "email": attendee.email,
                "timeZone": attendee.time_zone,
            },
        }
        response = self._send("POST", "/api/bookings", json=payload)
        data = self._json_or_raise(response, "Booking failed")
        booking = BookingPayload.model_validate(data["data"]).to_entity()
        self._logger.info("Booking created via API", extra={"uid": booking.uid})
        return booking

    def get_booking(self, uid: str) -> Booking:
        response = self._send("GET", f"/api/bookings/{uid}")
        data = self._json_or_raise(response, "Failed to fetch booking")
        return BookingPayload.model_validate(data["data"]).to_entity()

    def list_bookings(
        self,
        take: int = 5,
        skip: int = 0,
        after_start: str | None = None,
        before_end: str | None = None,
    ) -> tuple[list[Booking], PaginationInfo]:
        params = {"take": str(take), "skip": str(skip)}
        if after_start:
            params["afterStart"] = after_start
        if before_end:
            params["beforeEnd"] = before_end

        response = self._send("GET", "/api/bookings/list", params=params)
        data = self._json_or_raise(response, "Failed to fetch bookings")
        bookings = [BookingPayload.model_validate(item).to_entity() for item in data.get("data", [])]
        pagination = PaginationPayload.model_validate(data["pagination"]).to_entity()
        return bookings, pagination

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return self._client.request(method, path, headers=self._headers, **kwargs)
        except httpx.HTTPError as e:
            self._logger.error("Scheduling API unreachable", extra={"path": path, "error": str(e)})
            raise SchedulingApiError(f"Scheduling API unreachable: {e}") from e

    def _json_or_raise(self, response: httpx.Response, fallback: str) -> dict[str, Any]:
        if response.is_success:
            return response.json()

        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get("message") if isinstance(body, dict) else None
        message = message or f"{fallback}: {response.status_code}"
        self._logger.error(
            "Scheduling API request failed",
            extra={"path": response.request.url.path, "error": message},
        )
        raise SchedulingApiError(message, status_code=response.status_code)
