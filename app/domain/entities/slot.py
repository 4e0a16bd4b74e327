from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Slot:
    time: datetime  # start of a free window, aware UTC


@dataclass(frozen=True)
class TimeSlot:
    id: str
    start_utc: str  # ISO string as returned by the API
    display_time: str  # "h:mm AM" in the visitor's timezone
    available: bool = True
