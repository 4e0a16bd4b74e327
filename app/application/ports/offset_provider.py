from __future__ import annotations

from abc import ABC, abstractmethod


class OffsetProviderPort(ABC):
    @abstractmethod
    def offset_hours(self, time_zone: str) -> int:
        """Whole-hour offset from UTC for a timezone name."""
        raise NotImplementedError
