"""Shared type definitions for the room diagram generator."""
from typing import Literal, NamedTuple

Point = tuple[float, float]

Wall = Literal["north", "east", "south", "west"]
Axis = Literal["horizontal", "vertical"]

# Walls in the order they are walked when rendering.
WALLS: tuple[Wall, ...] = ("north", "east", "south", "west")

class Span(NamedTuple):
    """A feature's footprint on a wall, in diagram pixels.

    start is always the end with the smaller global coordinate.
    """
    start: Point; end: Point; axis: Axis
