from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from app.application.dto.booking_payload import BookingPayload
from app.application.exceptions import StorageError
from app.application.ports.booking_store import BookingStorePort
from app.domain.entities.booking import Booking


class JsonBookingStore(BookingStorePort):
    def __init__(self, data_dir: str = "./data", file_name: str = "bookings.json") -> None:
        self._data_dir = Path(data_dir)
        self._file_path = self._data_dir / file_name
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _ensure_data_dir(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def _serialize_booking(self, booking: Booking) -> dict[str, Any]:
        return BookingPayload.from_entity(booking).model_dump(by_alias=True)

    def _deserialize_booking(self, data: dict[str, Any]) -> Booking:
        return BookingPayload.model_validate(data).to_entity()

    def load(self) -> dict[str, Booking]:
        """Load bookings from the JSON file, empty mapping if missing or unreadable."""
        with self._lock:
            if not self._file_path.exists():
                return {}

            try:
                with open(self._file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, list):
                    raise ValueError("Bookings file must contain a JSON array")
                bookings: dict[str, Booking] = {}
                for item in data:
                    booking = self._deserialize_booking(item)
                    bookings[booking.uid] = booking
                return bookings
            except (json.JSONDecodeError, ValidationError, ValueError, TypeError, OSError) as e:
                self._logger.error(
                    "Error loading bookings",
                    extra={"path": str(self._file_path), "error": str(e)},
                )
                return {}

    def save(self, bookings: dict[str, Booking]) -> None:
        """Save the full snapshot atomically. Raises StorageError on failure."""
        with self._lock:
            payload = [self._serialize_booking(b) for b in bookings.values()]
            temp_path = self._file_path.with_suffix(".json.tmp")

            try:
                self._ensure_data_dir()
                with open(temp_path, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2, ensure_ascii=False)
                temp_path.replace(self._file_path)
            except OSError as e:
                if temp_path.exists():
                    try:
                        temp_path.unlink()
                    except OSError:
                        pass
                raise StorageError(f"Could not write bookings to {self._file_path}") from e

            self._logger.info(
                "Saved bookings",
                extra={"count": len(payload), "path": str(self._file_path)},
            )

    def get(self, uid: str) -> Booking | None:
        return self.load().get(uid)

    def clear(self) -> None:
        self.save({})
