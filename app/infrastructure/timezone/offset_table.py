from __future__ import annotations

from app.application.ports.offset_provider import OffsetProviderPort

# Fixed standard-time offsets, no DST.
TIMEZONE_OFFSETS: dict[str, int] = {
    "America/Los_Angeles": -8,
    "America/Denver": -7,
    "America/Chicago": -6,
    "America/New_York": -5,
    "UTC": 0,
    "Europe/London": 0,
    "Europe/Paris": 1,
    "Asia/Tokyo": 9,
}

DEFAULT_OFFSET_HOURS = -8


class FixedOffsetTable(OffsetProviderPort):
    def __init__(
        self,
        offsets: dict[str, int] | None = None,
        default_offset: int = DEFAULT_OFFSET_HOURS,
    ) -> None:
        self._offsets = offsets if offsets is not None else TIMEZONE_OFFSETS
        self._default_offset = default_offset

    def offset_hours(self, time_zone: str) -> int:
        return self._offsets.get(time_zone, self._default_offset)
