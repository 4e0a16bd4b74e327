#!/usr/bin/env python3
"""
Reset the local booking store.

Usage:
  python3 scripts/reset_bookings.py            # clear, then reseed demo bookings
  python3 scripts/reset_bookings.py --empty    # clear only
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.use_cases.demo_seed import ensure_seeded
from app.wiring.dependencies import get_booking_store, get_offset_provider, get_slot_generator


def main(argv: list[str]) -> int:
    store = get_booking_store()
    store.clear()
    print("✅ Cleared bookings")

    if "--empty" in argv:
        return 0

    created = ensure_seeded(store, get_slot_generator(get_offset_provider()))
    print(f"✅ Seeded {created} demo bookings")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
