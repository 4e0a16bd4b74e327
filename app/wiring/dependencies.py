from functools import lru_cache
import logging

from fastapi import Depends

from app.core.config import settings
from app.application.ports.booking_store import BookingStorePort
from app.application.ports.calendar import CalendarPort
from app.application.ports.offset_provider import OffsetProviderPort
from app.application.use_cases.availability import AvailabilityResolver
from app.application.use_cases.booking import BookingUseCase
from app.application.use_cases.list_bookings import BookingQueryUseCase
from app.application.use_cases.scheduler import SchedulerUseCase
from app.application.use_cases.slot_generator import SlotGenerator
from app.domain.entities.business_hours import BusinessHours
from app.infrastructure.calendar.mock_calendar import MockCalendar
from app.infrastructure.calendar.scheduling_client import SchedulingApiClient
from app.infrastructure.store.json_store import JsonBookingStore
from app.infrastructure.store.memory_store import MemoryBookingStore
from app.infrastructure.timezone.offset_table import FixedOffsetTable


@lru_cache
def get_booking_store() -> BookingStorePort:
    logger = logging.getLogger(__name__)
    if settings.STORE_PROVIDER.lower() == "memory":
        logger.info("Using MemoryBookingStore")
        return MemoryBookingStore()
    logger.info("Using JsonBookingStore", extra={"path": settings.DATA_DIR})
    return JsonBookingStore(data_dir=settings.DATA_DIR, file_name=settings.BOOKINGS_FILE)


@lru_cache
def get_offset_provider() -> OffsetProviderPort:
    return FixedOffsetTable()


def get_business_hours() -> BusinessHours:
    return BusinessHours(start=settings.BUSINESS_HOURS_START, end=settings.BUSINESS_HOURS_END)


def get_slot_generator(
    offsets: OffsetProviderPort = Depends(get_offset_provider),
) -> SlotGenerator:
    return SlotGenerator(
        offsets=offsets,
        host_timezone=settings.HOST_TIMEZONE,
        business_hours=get_business_hours(),
        interval_minutes=settings.SLOT_INTERVAL_MINUTES,
    )


def get_availability_resolver(
    generator: SlotGenerator = Depends(get_slot_generator),
    store: BookingStorePort = Depends(get_booking_store),
) -> AvailabilityResolver:
    return AvailabilityResolver(generator=generator, store=store)


def get_booking_use_case(
    store: BookingStorePort = Depends(get_booking_store),
    offsets: OffsetProviderPort = Depends(get_offset_provider),
) -> BookingUseCase:
    return BookingUseCase(store=store, offsets=offsets, business_hours=get_business_hours())


def get_booking_query(
    store: BookingStorePort = Depends(get_booking_store),
) -> BookingQueryUseCase:
    return BookingQueryUseCase(store=store)


def get_calendar(remote: bool = False) -> CalendarPort:
    """In-process mock provider by default; the HTTP client when remote is set."""
    if remote:
        return SchedulingApiClient()
    store = get_booking_store()
    offsets = get_offset_provider()
    return MockCalendar(
        resolver=get_availability_resolver(get_slot_generator(offsets), store),
        booking_use_case=get_booking_use_case(store, offsets),
        query=get_booking_query(store),
    )


def get_scheduler(remote: bool = False) -> SchedulerUseCase:
    return SchedulerUseCase(calendar=get_calendar(remote), event_type_id=settings.EVENT_TYPE_ID)
