"""
Tests for booking validation and creation.
"""

from __future__ import annotations

import random
import tempfile
import threading
from datetime import date, datetime, timedelta, timezone

import pytest

from app.application.exceptions import (
    BadRequestError,
    OutOfHoursError,
    SlotTakenError,
    StorageError,
)
from app.application.ports.booking_store import BookingStorePort
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.demo_seed import ensure_seeded
from app.application.use_cases.slot_generator import SlotGenerator
from app.application.utils.date_utils import parse_instant
from app.domain.entities.booking import Attendee, Booking
from app.domain.entities.business_hours import BusinessHours
from app.infrastructure.store.json_store import JsonBookingStore
from app.infrastructure.store.memory_store import MemoryBookingStore
from app.infrastructure.timezone.offset_table import FixedOffsetTable

CHICAGO = "America/Chicago"


def _use_case(store: BookingStorePort | None = None) -> tuple[BookingUseCase, BookingStorePort]:
    store = store or MemoryBookingStore()
    uc = BookingUseCase(
        store=store,
        offsets=FixedOffsetTable(),
        business_hours=BusinessHours(start=9, end=17),
        rng=random.Random(7),
    )
    return uc, store


def _attendee(time_zone: str = CHICAGO, **overrides: str) -> Attendee:
    fields = {"name": "Ada Lovelace", "email": "ada@example.com", "time_zone": time_zone}
    fields.update(overrides)
    return Attendee(**fields)


def test_create_booking_success():
    uc, store = _use_case()

    result = uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee())

    assert result.ok
    assert result.error is None
    booking = result.booking
    assert booking.start == datetime(2025, 1, 28, 15, 0, tzinfo=timezone.utc)
    assert booking.end == datetime(2025, 1, 28, 15, 30, tzinfo=timezone.utc)
    assert booking.duration == 30
    assert booking.status == "accepted"
    assert booking.title == "Meeting with Ada Lovelace"
    assert booking.attendees == (_attendee(),)
    assert 0 <= booking.id < 100000
    assert store.load() == {booking.uid: booking}


def test_uid_format():
    uc, _ = _use_case()

    booking = uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee()).booking

    prefix, timestamp, booking_id = booking.uid.split("_")
    assert prefix == "booking"
    assert timestamp.isdigit()
    assert booking_id == str(booking.id)


def test_duration_defaults_to_thirty_and_sixty_is_allowed():
    uc, _ = _use_case()

    default = uc.create(123, "2025-01-28T15:00:00Z", None, _attendee()).booking
    hour = uc.create(123, "2025-01-28T16:00:00Z", 60, _attendee()).booking

    assert default.duration == 30
    assert hour.end - hour.start == timedelta(minutes=60)


def test_before_business_hours_is_rejected():
    """14:00 UTC is 08:00 in UTC-6, before a 9-17 day."""
    uc, store = _use_case()

    result = uc.create(123, "2025-01-28T14:00:00Z", 30, _attendee())

    assert not result.ok
    assert isinstance(result.error, OutOfHoursError)
    assert store.load() == {}


def test_business_hours_end_is_exclusive():
    uc, _ = _use_case()

    assert uc.create(123, "2025-01-28T22:30:00Z", 30, _attendee()).ok
    assert isinstance(uc.create(123, "2025-01-28T23:00:00Z", 30, _attendee()).error, OutOfHoursError)


def test_business_hours_use_attendee_timezone():
    uc, _ = _use_case()

    # 14:00 UTC is 09:00 in UTC-5
    assert uc.create(123, "2025-01-28T14:00:00Z", 30, _attendee("America/New_York")).ok


def test_same_start_twice_is_rejected():
    uc, store = _use_case()

    first = uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee())
    second = uc.create(123, "2025-01-28T15:00:00Z", 60, _attendee(name="Grace Hopper"))

    assert first.ok
    assert isinstance(second.error, SlotTakenError)
    assert len(store.load()) == 1


def test_conflict_compares_instants_not_strings():
    uc, _ = _use_case()

    first = uc.create(123, "2025-01-28T09:00:00-06:00", 30, _attendee())
    second = uc.create(123, "2025-01-28T15:00:00.000Z", 30, _attendee())

    assert first.booking.start == datetime(2025, 1, 28, 15, 0, tzinfo=timezone.utc)
    assert isinstance(second.error, SlotTakenError)


def test_overlapping_but_different_start_is_accepted():
    uc, store = _use_case()

    uc.create(123, "2025-01-28T15:00:00Z", 60, _attendee())
    result = uc.create(123, "2025-01-28T15:30:00Z", 30, _attendee())

    assert result.ok
    assert len(store.load()) == 2


@pytest.mark.parametrize(
    "event_type_id,start,duration,attendee",
    [
        (None, "2025-01-28T15:00:00Z", 30, _attendee()),
        (123, None, 30, _attendee()),
        (123, "", 30, _attendee()),
        (123, "2025-01-28T15:00:00Z", 30, None),
        (123, "2025-01-28T15:00:00Z", 30, _attendee(name="")),
        (123, "2025-01-28T15:00:00Z", 30, _attendee(email="")),
        (123, "2025-01-28T15:00:00Z", 30, _attendee(time_zone="")),
        (123, "next tuesday", 30, _attendee()),
        (123, "2025-01-28T15:00:00Z", 45, _attendee()),
    ],
)
def test_bad_requests_are_rejected_without_writes(event_type_id, start, duration, attendee):
    uc, store = _use_case()

    result = uc.create(event_type_id, start, duration, attendee)

    assert isinstance(result.error, BadRequestError)
    assert result.error.kind == "bad_request"
    assert store.load() == {}


def test_validation_runs_before_hours_and_hours_before_conflicts():
    existing_start = datetime(2025, 1, 28, 14, 0, tzinfo=timezone.utc)
    store = MemoryBookingStore(
        {
            "b1": Booking(
                id=1,
                uid="b1",
                title="Meeting with Someone",
                start=existing_start,
                end=existing_start + timedelta(minutes=30),
                duration=30,
            )
        }
    )
    uc, _ = _use_case(store)

    missing_email = uc.create(123, "2025-01-28T14:00:00Z", 30, _attendee(email=""))
    out_of_hours = uc.create(123, "2025-01-28T14:00:00Z", 30, _attendee())

    assert isinstance(missing_email.error, BadRequestError)
    assert isinstance(out_of_hours.error, OutOfHoursError)


class _FailingStore(MemoryBookingStore):
    def save(self, bookings):
        raise StorageError("disk full")


def test_storage_write_errors_propagate():
    uc, _ = _use_case(_FailingStore())

    with pytest.raises(StorageError):
        uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee())


def _run_together(*targets) -> None:
    barrier = threading.Barrier(len(targets))

    def run(target):
        barrier.wait()
        target()

    threads = [threading.Thread(target=run, args=(target,)) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def test_concurrent_creates_for_one_start_book_it_once():
    with tempfile.TemporaryDirectory() as tmp:
        store = JsonBookingStore(data_dir=tmp)
        uc, _ = _use_case(store)
        results = []

        def book(i: int):
            results.append(uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee(name=f"Guest {i}")))

        _run_together(*[lambda i=i: book(i) for i in range(16)])

        assert len(results) == 16
        assert sum(1 for r in results if r.ok) == 1
        assert all(isinstance(r.error, SlotTakenError) for r in results if not r.ok)
        assert len(JsonBookingStore(data_dir=tmp).load()) == 1


def test_concurrent_creates_at_different_starts_all_persist():
    with tempfile.TemporaryDirectory() as tmp:
        store = JsonBookingStore(data_dir=tmp)
        uc, _ = _use_case(store)
        starts = [f"2025-01-28T{hour:02d}:{minute:02d}:00Z" for hour in range(15, 23) for minute in (0, 30)]

        _run_together(*[lambda s=s: uc.create(123, s, 30, _attendee()) for s in starts])

        stored = JsonBookingStore(data_dir=tmp).load()
        assert sorted(b.start for b in stored.values()) == sorted(parse_instant(s) for s in starts)


def test_seeding_racing_a_create_loses_nothing():
    generator = SlotGenerator(
        offsets=FixedOffsetTable(),
        host_timezone=CHICAGO,
        business_hours=BusinessHours(start=9, end=17),
    )
    with tempfile.TemporaryDirectory() as tmp:
        store = JsonBookingStore(data_dir=tmp)
        uc, _ = _use_case(store)
        seeded = []
        results = []

        _run_together(
            lambda: seeded.append(ensure_seeded(store, generator, today=date(2025, 1, 27))),
            lambda: results.append(uc.create(123, "2025-01-28T15:00:00Z", 30, _attendee())),
        )

        stored = JsonBookingStore(data_dir=tmp).load()
        created = 1 if results[0].ok else 0
        assert len(stored) == seeded[0] + created
        if seeded[0] == 0:
            assert results[0].ok
        if results[0].ok:
            assert results[0].booking.uid in stored
