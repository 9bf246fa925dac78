import pytest
from pydantic import ValidationError

from room_booking.catalog import (
    FLOOR_ROOMS,
    LOCATION_FLOORS,
    ROOM_TIME_SLOTS,
    Catalog,
    build_default_catalog,
)
from room_booking.errors import CatalogConfigError


def test_default_catalog_keeps_table_order():
    catalog = build_default_catalog()
    assert catalog.locations() == list(LOCATION_FLOORS)
    assert catalog.floors("FPT Tower") == ["10", "11", "12"]
    assert catalog.rooms("FPT Tower", "12")[0] == "FPTT-12F-Exec Suite"


def test_accessors_return_copies():
    catalog = build_default_catalog()
    floors = catalog.floors("Hoà Lạc")
    floors.append("99")
    assert catalog.floors("Hoà Lạc") == ["1", "2"]


def test_catalog_is_frozen():
    catalog = build_default_catalog()
    with pytest.raises(ValidationError):
        catalog.slots_by_room = {}


def test_tables_reject_item_changes():
    catalog = build_default_catalog()
    with pytest.raises(TypeError):
        catalog.floors_by_location["Hoà Lạc"] = ("9",)
    with pytest.raises(TypeError):
        catalog.rooms_by_floor["Hoà Lạc"]["1"] = ("Broom Closet",)
    with pytest.raises(TypeError):
        catalog.slots_by_room["HL-1F-Room A"] = ()
    assert catalog.floors("Hoà Lạc") == ["1", "2"]
    assert catalog.rooms("Hoà Lạc", "1") == ["HL-1F-Room A", "HL-1F-Room B"]


def test_find_room_searches_every_location():
    catalog = build_default_catalog()
    assert catalog.find_room("FV3-C3-Think Tank") == ("Fville 3", "C3")
    assert catalog.find_room("No Such Room") is None


def test_unknown_lookups_are_empty():
    catalog = build_default_catalog()
    assert catalog.floors("Nowhere") is None
    assert catalog.rooms("Nowhere", "1") == []
    assert catalog.slots("No Such Room") == []


def test_floor_without_room_entry_is_rejected():
    with pytest.raises(CatalogConfigError, match="has no room entry"):
        Catalog.from_tables({"Annex": ["B1"]}, {"Annex": {}}, {})


def test_location_without_room_table_is_rejected():
    with pytest.raises(CatalogConfigError, match="has no room table"):
        Catalog.from_tables({"Annex": ["B1"]}, {}, {})


def test_room_without_slot_entry_is_rejected():
    with pytest.raises(CatalogConfigError, match="has no time slot entry"):
        Catalog.from_tables({"Annex": ["B1"]}, {"Annex": {"B1": ["Storage"]}}, {})


def test_duplicate_room_names_are_rejected():
    with pytest.raises(CatalogConfigError, match="must be unique"):
        Catalog.from_tables(
            {"North": ["1"], "South": ["1"]},
            {"North": {"1": ["Room A"]}, "South": {"1": ["Room A"]}},
            {"Room A": ["09:00 - 10:00"]},
        )


def test_default_tables_have_unique_rooms():
    rooms = [room for floors in FLOOR_ROOMS.values() for names in floors.values() for room in names]
    assert len(rooms) == len(set(rooms))
    assert set(rooms) == set(ROOM_TIME_SLOTS)


def test_unlisted_floor_in_room_table_is_rejected():
    with pytest.raises(CatalogConfigError, match="is not listed for that location"):
        Catalog.from_tables(
            {"A": ["1"]},
            {"A": {"1": ["R"], "9": ["R", "Ghost"]}},
            {"R": ["09:00 - 10:00"]},
        )


def test_unlisted_location_in_room_table_is_rejected():
    with pytest.raises(CatalogConfigError, match="names unknown location"):
        Catalog.from_tables(
            {"A": ["1"]},
            {"A": {"1": ["R"]}, "B": {"1": ["Ghost"]}},
            {"R": ["09:00 - 10:00"]},
        )
