from __future__ import annotations

import logging
import random
from datetime import date, datetime, timedelta, timezone

from app.application.ports.booking_store import BookingStorePort
from app.application.use_cases.booking import MAX_BOOKING_ID
from app.application.use_cases.slot_generator import SeededRandom, SlotGenerator
from app.domain.entities.booking import Attendee, Booking, booking_title

DEMO_SEED = 42
DEMO_DAYS = 7
DEMO_TIMEZONE = "America/Los_Angeles"
DEMO_NAMES = (
    "Alice Johnson", "Bob Smith", "Carol Williams", "David Brown",
    "Emma Davis", "Frank Miller", "Grace Wilson", "Henry Moore",
    "Ivy Taylor", "Jack Anderson", "Kate Thomas", "Leo Jackson",
    "Maria Garcia", "Nathan Lee", "Olivia Martinez", "Peter Wong",
)

logger = logging.getLogger(__name__)


def ensure_seeded(
    store: BookingStorePort,
    generator: SlotGenerator,
    today: date | None = None,
    id_rng: random.Random | None = None,
) -> int:
    """
    Fill an empty store with reproducible demo bookings for the next week.
    Returns the number of bookings created; 0 when the store already has data.
    """
    with store.lock:
        existing = store.load()
        if existing:
            logger.info("Loaded existing bookings", extra={"count": len(existing)})
            return 0

        logger.info("No bookings found, creating demo data")
        start_day = today or datetime.now(timezone.utc).date()
        bookings = _demo_bookings(generator, start_day, id_rng or random.Random())
        store.save(bookings)

    logger.info("Initialized demo bookings", extra={"count": len(bookings)})
    return len(bookings)


def _demo_bookings(generator: SlotGenerator, start_day: date, id_rng: random.Random) -> dict[str, Booking]:
    rng = SeededRandom(DEMO_SEED)
    bookings: dict[str, Booking] = {}

    for day_offset in range(DEMO_DAYS):
        day_slots = generator.generate(start_day + timedelta(days=day_offset))
        if not day_slots:
            continue

        # even days are quiet (2-4 bookings), odd days busy (6-8)
        if day_offset % 2 == 0:
            to_book = int(rng.random() * 3) + 2
        else:
            to_book = int(rng.random() * 3) + 6

        used: set[int] = set()
        for i in range(to_book):
            if len(used) >= len(day_slots):
                break
            index = int(rng.random() * len(day_slots))
            while index in used:
                index = int(rng.random() * len(day_slots))
            used.add(index)

            slot_time = day_slots[index]
            name = DEMO_NAMES[int(rng.random() * len(DEMO_NAMES))]
            duration = 60 if rng.random() > 0.7 else 30
            booking_id = id_rng.randrange(MAX_BOOKING_ID)
            uid = f"demo_{day_offset}_{i}_{booking_id}"

            bookings[uid] = Booking(
                id=booking_id,
                uid=uid,
                title=booking_title(name),
                start=slot_time,
                end=slot_time + timedelta(minutes=duration),
                duration=duration,
                status="accepted",
                attendees=(
                    Attendee(
                        name=name,
                        email=f"{name.lower().replace(' ', '.', 1)}@example.com",
                        time_zone=DEMO_TIMEZONE,
                    ),
                ),
            )

    return bookings
