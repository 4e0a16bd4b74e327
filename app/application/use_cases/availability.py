from __future__ import annotations

import logging
from datetime import datetime, timedelta

from app.application.ports.booking_store import BookingStorePort
from app.application.use_cases.slot_generator import SlotGenerator
from app.application.utils.date_utils import utc_midnight
from app.domain.entities.slot import Slot


class AvailabilityResolver:
    def __init__(self, generator: SlotGenerator, store: BookingStorePort) -> None:
        self._generator = generator
        self._store = store
        self._logger = logging.getLogger(__name__)

    def resolve(self, range_start: datetime, range_end: datetime, time_zone: str = "UTC") -> list[Slot]:
        """
        Free slots in [range_start, range_end), chronological.
        Slots starting at the same instant as an existing booking are removed.
        """
        booked_starts = {b.start for b in self._store.load().values()}

        slots: list[Slot] = []
        current = utc_midnight(range_start)
        while current < range_end:
            for slot_time in self._generator.generate(current.date()):
                if slot_time in booked_starts:
                    continue
                if range_start <= slot_time < range_end:
                    slots.append(Slot(time=slot_time))
            current += timedelta(days=1)
        slots.sort(key=lambda s: s.time)

        self._logger.info(
            "Resolved available slots",
            extra={"count": len(slots), "time_zone": time_zone},
        )
        return slots
