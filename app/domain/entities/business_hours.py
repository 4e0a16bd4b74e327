from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BusinessHours:
    start: int = 9  # host local hour, inclusive
    end: int = 17  # host local hour, exclusive

    def contains_hour(self, hour: int) -> bool:
        return self.start <= hour < self.end
