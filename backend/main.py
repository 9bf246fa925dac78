from fastapi import FastAPI, Depends, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import uvicorn
from datetime import datetime, timezone
import logging
from typing import Annotated, List, Optional

from room_booking.catalog import build_default_catalog
from room_booking.directory import UserDirectory
from room_booking.errors import BookingError, CatalogLookupError, RejectionReason
from room_booking.models import BookingConfirmation, BookingIntent, RoomWithSlots, UserAssignment
from room_booking.services import BookingService
from room_booking.settings import load_settings
from room_booking.validator import CatalogValidator

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

SERVICE_NAME = "room-booking-backend"

AVAILABLE_ENDPOINTS = [
    "/health",
    "/api/locations",
    "/api/floors",
    "/api/rooms",
    "/api/rooms/detailed",
    "/api/timeslots",
    "/api/book",
    "/api/user-location/{username}",
]

# Built once at import; the catalog and directory never change afterwards.
user_directory = UserDirectory()
catalog_validator = CatalogValidator(
    build_default_catalog(),
    directory=user_directory,
    require_user=settings.require_user,
)
booking_service = BookingService(catalog_validator, user_directory)


def get_validator() -> CatalogValidator:
    return catalog_validator


def get_booking_service() -> BookingService:
    return booking_service


Validator = Annotated[CatalogValidator, Depends(get_validator)]
Bookings = Annotated[BookingService, Depends(get_booking_service)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting Room Booking Backend (user binding %s)",
        "enabled" if settings.require_user else "disabled",
    )
    yield
    logger.info("Shutting down Room Booking Backend...")

app = FastAPI(
    title="Room Booking API",
    description="Meeting room catalog lookup and mock booking API",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=["*"]
)

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": SERVICE_NAME
    }


@app.get("/api/health")
async def health_check_api():
    return await health_check()


@app.get("/api/locations", response_model=List[str])
async def list_locations(validator: Validator):
    return validator.list_locations()


@app.get("/api/floors", response_model=List[str])
async def list_floors(validator: Validator, location: Optional[str] = Query(None)):
    return validator.list_floors(location)


@app.get("/api/rooms", response_model=List[str])
async def list_rooms(
    validator: Validator,
    location: Optional[str] = Query(None),
    floor: Optional[str] = Query(None),
):
    return validator.list_rooms(location, floor)


@app.get("/api/rooms/detailed", response_model=List[RoomWithSlots])
async def list_rooms_detailed(
    validator: Validator,
    location: Optional[str] = Query(None),
    floor: Optional[str] = Query(None),
):
    return validator.list_rooms_with_slots(location, floor)


@app.get("/api/timeslots", response_model=List[str])
async def list_time_slots(validator: Validator, room: Optional[str] = Query(None)):
    if not room:
        raise CatalogLookupError(RejectionReason.UNKNOWN_ROOM, "Missing room parameter")
    return validator.list_time_slots(room)


@app.post("/api/book", response_model=BookingConfirmation)
async def book_room(intent: BookingIntent, bookings: Bookings):
    return bookings.book_room(intent)


@app.get("/api/user-location/{username}", response_model=UserAssignment)
async def get_user_location(username: str, bookings: Bookings):
    return bookings.get_user_location(username)


@app.exception_handler(BookingError)
async def booking_error_handler(request: Request, exc: BookingError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(404)
async def not_found_handler(request, exc):
    logger.info("404 Error: Requested path: %s", request.url.path)
    return JSONResponse(
        status_code=404,
        content={
            "error": "Resource not found",
            "path": str(request.url.path),
            "available_endpoints": AVAILABLE_ENDPOINTS,
        }
    )

@app.exception_handler(500)
async def internal_error_handler(request, exc):
    logger.error("Unhandled error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True
    )
