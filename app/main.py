import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from app.api.v1.bookings import router as bookings_router
from app.api.v1.responses import error_response
from app.api.v1.slots import router as slots_router
from app.application.use_cases.demo_seed import ensure_seeded
from app.core.config import settings
from app.wiring.dependencies import get_booking_store, get_offset_provider, get_slot_generator

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("uid", "start", "time_zone", "count", "path", "reason", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_DEMO_BOOKINGS:
        store = app.dependency_overrides.get(get_booking_store, get_booking_store)()
        ensure_seeded(store, get_slot_generator(get_offset_provider()))
    yield


app = FastAPI(title="Appointment Scheduler", version="1.0.0", lifespan=lifespan)

app.include_router(slots_router, tags=["slots"])
app.include_router(bookings_router, tags=["bookings"])


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request", extra={"path": request.url.path, "error": str(exc)})
    return error_response(400, "Invalid request parameters")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
