"""
Catalog lookups and booking validation.

``CatalogValidator`` answers the chain of queries a booking form walks through
(locations, then floors, rooms and time slots) and checks a complete booking
intent against the catalog. All methods are pure functions of their inputs and
the immutable catalog: nothing is reserved, recorded or marked unavailable, so
validating the same intent twice gives the same answer twice.

Detail-level failures in ``validate_booking`` all surface as a single
``InvalidDetails`` rejection. Callers are told that the combination is wrong,
not which field.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from .catalog import Catalog
from .directory import UserDirectory
from .errors import BookingRejected, CatalogLookupError, RejectionReason
from .models import BookingIntent, RoomWithSlots, ValidatedBooking

logger = logging.getLogger(__name__)

MISSING_FIELDS_WITH_USER = "Missing booking details (username, location, floor, room, timeSlot)"


class CatalogValidator:
    def __init__(
        self,
        catalog: Catalog,
        directory: Optional[UserDirectory] = None,
        require_user: bool = False,
    ):
        if require_user and directory is None:
            raise ValueError("require_user needs a user directory")
        self.catalog = catalog
        self.directory = directory
        self.require_user = require_user

    def list_locations(self) -> List[str]:
        return self.catalog.locations()

    def list_floors(self, location: str) -> List[str]:
        floors = self.catalog.floors(location) if location else None
        if floors is None:
            raise CatalogLookupError(RejectionReason.UNKNOWN_LOCATION)
        return floors

    def list_rooms(self, location: str, floor: str) -> List[str]:
        # Floor membership comes from the location's floor list, so a floor
        # without rooms is valid and yields an empty list.
        floors = self.list_floors(location)
        if not floor or floor not in floors:
            raise CatalogLookupError(RejectionReason.UNKNOWN_FLOOR)
        return self.catalog.rooms(location, floor)

    def list_rooms_with_slots(self, location: str, floor: str) -> List[RoomWithSlots]:
        return [
            RoomWithSlots(room_name=room, time_slots=self.catalog.slots(room))
            for room in self.list_rooms(location, floor)
        ]

    def list_time_slots(self, room: str) -> List[str]:
        """Slots for ``room``, looked up by name alone across the whole catalog."""
        if not room or self.catalog.find_room(room) is None:
            raise CatalogLookupError(RejectionReason.UNKNOWN_ROOM)
        return self.catalog.slots(room)

    def validate_booking(self, intent: BookingIntent) -> ValidatedBooking:
        required = [intent.location, intent.floor, intent.room, intent.time_slot]
        if self.require_user:
            required.append(intent.username)
        if not all(required):
            message = MISSING_FIELDS_WITH_USER if self.require_user else None
            raise BookingRejected(RejectionReason.MISSING_FIELDS, message)

        if self.require_user:
            # Raises UserNotFoundError before any detail checks run.
            assignment = self.directory.get_user_assignment(intent.username)
            if (intent.location, intent.floor) != (assignment.location, assignment.floor):
                logger.info(
                    "User %s is assigned to %s/%s, not %s/%s",
                    intent.username,
                    assignment.location,
                    assignment.floor,
                    intent.location,
                    intent.floor,
                )
                raise BookingRejected(RejectionReason.INVALID_DETAILS)

        if not self._matches_catalog(intent):
            raise BookingRejected(RejectionReason.INVALID_DETAILS)

        return ValidatedBooking(
            location=intent.location,
            floor=intent.floor,
            room=intent.room,
            time_slot=intent.time_slot,
            username=intent.username,
        )

    def _matches_catalog(self, intent: BookingIntent) -> bool:
        floors = self.catalog.floors(intent.location)
        if floors is None or intent.floor not in floors:
            return False
        if intent.room not in self.catalog.rooms(intent.location, intent.floor):
            return False
        return intent.time_slot in self.catalog.slots(intent.room)
