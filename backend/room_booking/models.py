from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingIntent(BaseModel):
    # Fields stay optional so a missing value reaches the validator and is
    # reported as MissingFields rather than a framework 422.
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    location: Optional[str] = None
    floor: Optional[str] = None
    room: Optional[str] = None
    time_slot: Optional[str] = Field(default=None, alias="timeSlot")
    username: Optional[str] = None


class ValidatedBooking(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    location: str
    floor: str
    room: str
    time_slot: str = Field(alias="timeSlot")
    username: Optional[str] = None


class BookingConfirmation(BaseModel):
    success: bool = True
    message: str


class UserAssignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    location: str
    floor: str


class RoomWithSlots(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    room_name: str = Field(alias="roomName")
    time_slots: List[str] = Field(default_factory=list, alias="timeSlots")


class ErrorResponse(BaseModel):
    error: str
    code: Optional[str] = None
