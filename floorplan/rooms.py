"""Room type catalogue and display labels."""
from typing import NamedTuple


class RoomType(NamedTuple):
    id: str
    label: str


ROOM_TYPES = [
    RoomType("bedroom", "Bedroom"),
    RoomType("bathroom", "Bathroom"),
    RoomType("kitchen", "Kitchen"),
    RoomType("living-room", "Living Room"),
    RoomType("dining-room", "Dining Room"),
    RoomType("family-room", "Family Room"),
    RoomType("office", "Office"),
    RoomType("utility-room", "Utility"),
    RoomType("laundry", "Laundry"),
    RoomType("garage", "Garage"),
    RoomType("hallway", "Hallway"),
    RoomType("storage", "Storage"),
    RoomType("closet", "Closet"),
    RoomType("other", "Other"),
]

_LABELS = {t.id: t.label for t in ROOM_TYPES}


def generate_room_label(room_type: str, existing_types) -> str:
    """Label like 'Bedroom#2', numbered among existing rooms of the same type."""
    label = _LABELS.get(room_type, "Room")
    count = sum(1 for t in existing_types if t == room_type) + 1
    return f"{label}#{count}"
