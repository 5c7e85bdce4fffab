"""Wall-relative feature positions to diagram coordinates.

A feature's position is measured in feet from the wall's left edge as
seen by someone standing in the room facing that wall. Facing-left runs
with the global axis on north and east, and against it on south and
west, so those two walls are mirrored.

Diagram space: origin at the NW corner of the page, +X east, +Y south,
room outline offset by MARGIN on every side.
"""
from typing import NamedTuple

from shared.types import Axis, Point, Span, Wall
from floorplan.constants import MARGIN, PIXELS_PER_FOOT


class WallEdge(NamedTuple):
    """How one wall sits in diagram space."""
    axis: Axis
    mirrored: bool   # facing-left runs against the global axis
    far_edge: bool   # wall line is at MARGIN + room extent, not MARGIN
    inward: int      # sign of the perpendicular pointing into the room


WALL_EDGES: dict[Wall, WallEdge] = {
    "north": WallEdge("horizontal", mirrored=False, far_edge=False, inward=+1),
    "south": WallEdge("horizontal", mirrored=True,  far_edge=True,  inward=-1),
    "east":  WallEdge("vertical",   mirrored=False, far_edge=True,  inward=-1),
    "west":  WallEdge("vertical",   mirrored=True,  far_edge=False, inward=+1),
}


class DoorSwing(NamedTuple):
    hinge_at_end: bool   # hinge on span.end rather than span.start
    sweep: int           # SVG arc sweep flag


# (wall, swing direction) -> hinge side and sweep flag.
# A hinged door without a direction draws as "left".
DOOR_SWINGS: dict[tuple[Wall, str], DoorSwing] = {
    ("north", "right"): DoorSwing(hinge_at_end=True,  sweep=1),
    ("north", "left"):  DoorSwing(hinge_at_end=False, sweep=0),
    ("south", "right"): DoorSwing(hinge_at_end=False, sweep=1),
    ("south", "left"):  DoorSwing(hinge_at_end=True,  sweep=0),
    ("east", "right"):  DoorSwing(hinge_at_end=True,  sweep=1),
    ("east", "left"):   DoorSwing(hinge_at_end=False, sweep=0),
    ("west", "right"):  DoorSwing(hinge_at_end=False, sweep=1),
    ("west", "left"):   DoorSwing(hinge_at_end=True,  sweep=0),
}


def door_swing(wall: Wall, swing_direction: str | None) -> DoorSwing:
    return DOOR_SWINGS[(wall, "right" if swing_direction == "right" else "left")]


def map_feature(feature, wall: Wall, room_width_px: float, room_height_px: float,
                scale: float = PIXELS_PER_FOOT) -> Span:
    """Map a feature's wall-local span to a diagram Span.

    Out-of-range features are not clamped; validation happens upstream.
    """
    edge = WALL_EDGES[wall]
    pos_px = feature.position * scale
    width_px = feature.width * scale
    if edge.axis == "horizontal":
        along_len, across_len = room_width_px, room_height_px
    else:
        along_len, across_len = room_height_px, room_width_px

    along = MARGIN + (along_len - pos_px - width_px if edge.mirrored else pos_px)
    fixed = MARGIN + (across_len if edge.far_edge else 0)

    if edge.axis == "horizontal":
        return Span((along, fixed), (along + width_px, fixed), "horizontal")
    return Span((fixed, along), (fixed, along + width_px), "vertical")


def inward_point(p: Point, wall: Wall, d: float) -> Point:
    """Move p by d pixels perpendicular to the wall, into the room."""
    edge = WALL_EDGES[wall]
    if edge.axis == "horizontal":
        return (p[0], p[1] + edge.inward * d)
    return (p[0] + edge.inward * d, p[1])
