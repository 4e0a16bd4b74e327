from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from functools import cmp_to_key

from app.application.ports.offset_provider import OffsetProviderPort
from app.domain.entities.business_hours import BusinessHours

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2**31

MIN_SLOTS_PER_DAY = 6
SLOT_COUNT_SPREAD = 7  # 6..12 slots


class SeededRandom:
    """Linear-congruential generator yielding floats in [0, 1)."""

    def __init__(self, seed: int) -> None:
        self._seed = seed % LCG_MODULUS

    def random(self) -> float:
        self._seed = (self._seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._seed / LCG_MODULUS


def date_seed(value: str) -> int:
    """Polynomial string hash (h * 31 + c) kept in signed 32-bit range, absolute value."""
    h = 0
    for ch in value:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 2**31:
        h -= 2**32
    return abs(h)


class SlotGenerator:
    def __init__(
        self,
        offsets: OffsetProviderPort,
        host_timezone: str,
        business_hours: BusinessHours,
        interval_minutes: int = 30,
    ) -> None:
        self._offsets = offsets
        self._host_timezone = host_timezone
        self._business_hours = business_hours
        self._interval_minutes = interval_minutes

    def candidate_slots(self, day: date) -> list[datetime]:
        """Every interval boundary inside business hours, as UTC instants."""
        offset = self._offsets.offset_hours(self._host_timezone)
        start_hour = self._business_hours.start - offset
        end_hour = self._business_hours.end - offset
        midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)

        slots: list[datetime] = []
        for hour in range(start_hour, end_hour):
            for minute in range(0, 60, self._interval_minutes):
                slots.append(midnight + timedelta(hours=hour, minutes=minute))
        return slots

    def generate(self, day: date) -> list[datetime]:
        """Reproducible subset of the day's candidate slots, chronological."""
        candidates = self.candidate_slots(day)
        if not candidates:
            return []

        rng = SeededRandom(date_seed(day.isoformat()))
        count = int(rng.random() * SLOT_COUNT_SPREAD) + MIN_SLOTS_PER_DAY
        shuffled = sorted(candidates, key=cmp_to_key(lambda a, b: rng.random() - 0.5))
        return sorted(shuffled[:count])
