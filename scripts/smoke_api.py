#!/usr/bin/env python3
"""
Smoke test against a running server.

Usage:
  uvicorn app.main:app --port 8000
  python3 scripts/smoke_api.py [YYYY-MM-DD] [timezone]
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.utils.date_utils import format_date, format_time_in_zone
from app.wiring.dependencies import get_scheduler


def main(argv: list[str]) -> int:
    selected = date.fromisoformat(argv[0]) if argv else date.today() + timedelta(days=1)
    time_zone = argv[1] if len(argv) > 1 else "America/Chicago"
    scheduler = get_scheduler(remote=True)

    print("=" * 60)
    print(f"Slots for {format_date(selected)} ({time_zone})")
    print("=" * 60)
    slots = scheduler.get_available_slots(selected, time_zone)
    for slot in slots:
        print(f"  {slot.display_time:>8}  {slot.start_utc}")

    if not slots:
        print("❌ No slots available")
        return 1

    result = scheduler.book_appointment(slots[0], "Smoke Test", "smoke@example.com", time_zone)
    if not result.success:
        print(f"❌ Booking failed: {result.error}")
        return 1

    booking = result.booking
    print(f"✅ Booked {booking.uid} at {format_time_in_zone(booking.start, time_zone)}")

    details = scheduler.get_booking_details(booking.uid)
    print(f"✅ Fetched booking back: {details.success}")

    day_start = selected.isoformat()
    day_end = (selected + timedelta(days=1)).isoformat()
    for b in scheduler.get_user_bookings(day_start, day_end):
        print(f"  {b.start.isoformat()}  {b.title}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
