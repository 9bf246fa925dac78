"""
Rejection reasons and exceptions for room booking.

Every lookup or validation failure is raised as a ``BookingError`` carrying a
``RejectionReason``. The API layer turns these into JSON error bodies, so the
core never has to know about HTTP status codes.

Usage:
    from room_booking.errors import BookingRejected, RejectionReason

    raise BookingRejected(RejectionReason.INVALID_DETAILS)
"""

from enum import Enum
from typing import Optional


class RejectionReason(str, Enum):
    """Caller-facing reasons a query or booking was refused."""

    UNKNOWN_LOCATION = "UnknownLocation"
    UNKNOWN_FLOOR = "UnknownFloor"
    UNKNOWN_ROOM = "UnknownRoom"
    MISSING_FIELDS = "MissingFields"
    INVALID_DETAILS = "InvalidDetails"
    USER_NOT_FOUND = "UserNotFound"


USER_MESSAGES: dict[RejectionReason, str] = {
    RejectionReason.UNKNOWN_LOCATION: "Invalid or missing location parameter",
    RejectionReason.UNKNOWN_FLOOR: "Invalid or missing floor parameter for the specified location",
    RejectionReason.UNKNOWN_ROOM: "Invalid room parameter",
    RejectionReason.MISSING_FIELDS: "Missing booking details (location, floor, room, timeSlot)",
    RejectionReason.INVALID_DETAILS: "Invalid booking details provided.",
    RejectionReason.USER_NOT_FOUND: "User not found",
}


class BookingError(Exception):
    """Base exception for all booking failures."""

    status_code = 400

    def __init__(self, reason: RejectionReason, message: Optional[str] = None):
        self.reason = reason
        self.message = message or USER_MESSAGES[reason]
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.reason.value}


class CatalogLookupError(BookingError):
    """A location, floor or room named in a query is not in the catalog."""


class BookingRejected(BookingError):
    """A booking intent failed validation."""


class UserNotFoundError(BookingError):
    """The user directory has no entry for the requested username."""

    status_code = 404

    def __init__(self, username: str):
        self.username = username
        super().__init__(RejectionReason.USER_NOT_FOUND)


class CatalogConfigError(ValueError):
    """The static catalog tables break one of the catalog invariants."""
