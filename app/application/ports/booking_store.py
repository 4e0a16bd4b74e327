from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from app.domain.entities.booking import Booking


class BookingStorePort(ABC):
    @property
    @abstractmethod
    def lock(self) -> threading.RLock:
        """Re-entrant lock held around every load-mutate-save cycle."""
        raise NotImplementedError

    @abstractmethod
    def load(self) -> dict[str, Booking]:
        """Return all bookings keyed by uid. Empty when storage is absent or unreadable."""
        raise NotImplementedError

    @abstractmethod
    def save(self, bookings: dict[str, Booking]) -> None:
        """Overwrite storage with the full snapshot."""
        raise NotImplementedError

    @abstractmethod
    def get(self, uid: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
