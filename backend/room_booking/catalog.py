from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from .errors import CatalogConfigError

# Floors offered at each location, in display order.
LOCATION_FLOORS: Dict[str, List[str]] = {
    "Hoà Lạc": ["1", "2"],
    "FPT Tower": ["10", "11", "12"],
    "Duy Tân": ["3", "4"],
    "Fville 1": ["0", "1"],
    "Fville 2": ["A1", "B2"],
    "Fville 3": ["MH", "C3"],
}

# Rooms keyed by location, then floor.
FLOOR_ROOMS: Dict[str, Dict[str, List[str]]] = {
    "Hoà Lạc": {
        "1": ["HL-1F-Room A", "HL-1F-Room B"],
        "2": ["HL-2F-Conf Hall"],
    },
    "FPT Tower": {
        "10": ["FPTT-10F-Room 101", "FPTT-10F-Room 102"],
        "11": ["FPTT-11F-Meeting Hub"],
        "12": [
            "FPTT-12F-Exec Suite",
            "FPTT-12F-Room A",
            "FPTT-12F-Room B",
            "FPTT-12F-Conf Room",
            "FPTT-12F-Training Room",
        ],
    },
    "Duy Tân": {
        "3": ["DT-3F-Room Alpha"],
        "4": ["DT-4F-Room Beta"],
    },
    "Fville 1": {
        "0": ["FV1-GF-Innovation"],
        "1": ["FV1-1F-Collaboration"],
    },
    "Fville 2": {
        "A1": ["FV2-A1-Synergy"],
        "B2": ["FV2-B2-Focus"],
    },
    "Fville 3": {
        "MH": ["FV3-MH-Connect"],
        "C3": ["FV3-C3-Think Tank"],
    },
}

# Slots keyed by room name alone. Room names must be unique across every
# location and floor for this table to be unambiguous.
ROOM_TIME_SLOTS: Dict[str, List[str]] = {
    "HL-1F-Room A": ["09:00 - 10:00", "10:00 - 11:00", "14:00 - 15:00"],
    "HL-1F-Room B": ["09:30 - 10:30", "11:00 - 12:00", "15:00 - 16:00"],
    "HL-2F-Conf Hall": ["10:00 - 12:00", "13:30 - 15:30"],
    "FPTT-10F-Room 101": ["08:00 - 09:00", "10:00 - 11:00"],
    "FPTT-10F-Room 102": ["09:00 - 10:00", "13:00 - 14:00", "16:00 - 17:00"],
    "FPTT-11F-Meeting Hub": ["10:30 - 12:00", "14:00 - 15:30"],
    "FPTT-12F-Exec Suite": ["11:00 - 12:30", "14:00 - 16:00"],
    "FPTT-12F-Room A": ["11:00 - 12:00", "14:00 - 15:00", "16:00 - 17:00"],
    "FPTT-12F-Room B": ["09:00 - 10:00", "14:00 - 15:30"],
    "FPTT-12F-Conf Room": ["10:00 - 12:00", "14:00 - 16:00"],
    "FPTT-12F-Training Room": ["08:00 - 10:00", "14:00 - 17:00"],
    "DT-3F-Room Alpha": ["09:00 - 11:00", "14:00 - 16:00"],
    "DT-4F-Room Beta": ["10:00 - 12:00", "13:00 - 15:00"],
    "FV1-GF-Innovation": ["09:00 - 10:30", "14:30 - 16:00"],
    "FV1-1F-Collaboration": ["10:00 - 11:30", "13:00 - 14:30"],
    "FV2-A1-Synergy": ["08:30 - 10:00", "15:00 - 16:30"],
    "FV2-B2-Focus": ["10:30 - 12:00", "13:30 - 15:00"],
    "FV3-MH-Connect": ["09:00 - 10:00", "11:00 - 12:00", "14:00 - 15:00"],
    "FV3-C3-Think Tank": ["10:00 - 11:30", "13:00 - 14:30", "15:30 - 17:00"],
}


class Catalog(BaseModel):
    """Immutable location -> floor -> room -> time slot hierarchy.

    Built once at start-up and shared by reference. Tables are held as
    read-only mappings of tuples and every accessor hands back a fresh list,
    so nothing a caller does can change the catalog. Every room table entry
    must belong to a listed floor of a listed location.
    """

    model_config = ConfigDict(frozen=True)

    floors_by_location: Mapping[str, Tuple[str, ...]]
    rooms_by_floor: Mapping[str, Mapping[str, Tuple[str, ...]]]
    slots_by_room: Mapping[str, Tuple[str, ...]]

    @field_validator("floors_by_location", "slots_by_room", mode="after")
    @classmethod
    def _freeze_table(cls, value: Mapping[str, Tuple[str, ...]]) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_validator("rooms_by_floor", mode="after")
    @classmethod
    def _freeze_room_table(
        cls, value: Mapping[str, Mapping[str, Tuple[str, ...]]]
    ) -> Mapping[str, Mapping[str, Tuple[str, ...]]]:
        return MappingProxyType({location: MappingProxyType(dict(floors)) for location, floors in value.items()})

    @model_validator(mode="after")
    def _check_invariants(self) -> "Catalog":
        for location, floor_rooms in self.rooms_by_floor.items():
            listed = self.floors_by_location.get(location)
            if listed is None:
                raise ValueError(f"room table names unknown location {location!r}")
            for floor in floor_rooms:
                if floor not in listed:
                    raise ValueError(f"floor {floor!r} at {location!r} is not listed for that location")

        seen: Dict[str, Tuple[str, str]] = {}
        for location, floors in self.floors_by_location.items():
            floor_rooms = self.rooms_by_floor.get(location)
            if floor_rooms is None:
                raise ValueError(f"location {location!r} has no room table")
            for floor in floors:
                if floor not in floor_rooms:
                    raise ValueError(f"floor {floor!r} at {location!r} has no room entry")
                for room in floor_rooms[floor]:
                    if room in seen:
                        other_location, other_floor = seen[room]
                        raise ValueError(
                            f"room {room!r} appears at {other_location!r}/{other_floor!r} "
                            f"and {location!r}/{floor!r}; room names must be unique"
                        )
                    seen[room] = (location, floor)
                    if room not in self.slots_by_room:
                        raise ValueError(f"room {room!r} has no time slot entry")
        return self

    @classmethod
    def from_tables(
        cls,
        floors_by_location: Mapping[str, Sequence[str]],
        rooms_by_floor: Mapping[str, Mapping[str, Sequence[str]]],
        slots_by_room: Mapping[str, Sequence[str]],
    ) -> "Catalog":
        try:
            return cls(
                floors_by_location=dict(floors_by_location),
                rooms_by_floor={loc: dict(floors) for loc, floors in rooms_by_floor.items()},
                slots_by_room=dict(slots_by_room),
            )
        except ValidationError as exc:
            raise CatalogConfigError(str(exc)) from exc

    def locations(self) -> List[str]:
        return list(self.floors_by_location)

    def floors(self, location: str) -> Optional[List[str]]:
        floors = self.floors_by_location.get(location)
        return list(floors) if floors is not None else None

    def rooms(self, location: str, floor: str) -> List[str]:
        return list(self.rooms_by_floor.get(location, {}).get(floor, ()))

    def slots(self, room: str) -> List[str]:
        return list(self.slots_by_room.get(room, ()))

    def find_room(self, room: str) -> Optional[Tuple[str, str]]:
        """Return the (location, floor) holding ``room``, searching every floor."""
        for location, floor_rooms in self.rooms_by_floor.items():
            for floor, rooms in floor_rooms.items():
                if room in rooms:
                    return location, floor
        return None


def build_default_catalog() -> Catalog:
    return Catalog.from_tables(LOCATION_FLOORS, FLOOR_ROOMS, ROOM_TIME_SLOTS)
