"""Room-analysis records: parsing and validation.

A RoomAnalysis is produced once per room by the analysis collaborator
(vision model or simulation) and consumed read-only by the diagram
generator. Two wire shapes are accepted:

* the model response, snake_case with ``_ft`` suffixes
  (``parse_analysis_response``);
* the session-store schema, camelCase (``analysis_from_dict``).

Both normalize to the same immutable records. Features are tagged by
kind so that each record carries only its own fields; feature types the
generator does not know are kept as OtherFeature and skipped later.
"""
import json
import logging
import math
from collections.abc import Mapping
from typing import NamedTuple

from shared.types import Wall, WALLS
from floorplan.constants import DEFAULT_CLOSET_DEPTH, POSITION_TOLERANCE

logger = logging.getLogger(__name__)


class AnalysisError(ValueError):
    """Raised for a room analysis that cannot produce a valid diagram."""


# ============================================================
# Records
# ============================================================

class Dimensions(NamedTuple):
    """Room footprint in feet. width runs E-W, height runs N-S."""
    width: float
    height: float
    confidence: float = 0.0


class ReferenceObject(NamedTuple):
    """Scale calibration hint. Not used by the diagram."""
    type: str
    known_size: float | None = None
    detected_size: float | None = None
    scale_factor: float | None = None


class DoorFeature(NamedTuple):
    position: float
    width: float
    height: float = 0.0
    distance_from_floor: float = 0.0
    swing_direction: str | None = None    # left | right | sliding
    door_type: str | None = None          # hinged | sliding
    opens_to: str | None = None
    notes: str = ""

    kind = "door"

    @property
    def is_sliding(self) -> bool:
        return self.door_type == "sliding" or self.swing_direction == "sliding"


class WindowFeature(NamedTuple):
    position: float
    width: float
    height: float = 0.0
    distance_from_floor: float = 0.0
    notes: str = ""

    kind = "window"


class ClosetFeature(NamedTuple):
    position: float
    width: float
    height: float = 0.0
    depth: float = DEFAULT_CLOSET_DEPTH
    door_type: str | None = None
    notes: str = ""

    kind = "closet"

    @property
    def is_sliding(self) -> bool:
        return self.door_type == "sliding"


class OtherFeature(NamedTuple):
    """A feature type this generator does not draw (e.g. ``skylight``)."""
    type: str
    position: object = None
    width: object = None
    notes: str = ""

    @property
    def kind(self) -> str:
        return self.type


Feature = DoorFeature | WindowFeature | ClosetFeature | OtherFeature

SWING_DIRECTIONS = (None, "left", "right", "sliding")


class RoomAnalysis(NamedTuple):
    dimensions: Dimensions
    walls: dict[Wall, tuple[Feature, ...]]
    ceiling_height: float = 0.0
    reference_object: ReferenceObject | None = None
    raw_response: str | None = None

    def wall_length(self, wall: Wall) -> float:
        """Length in feet of the given wall."""
        if wall in ("north", "south"):
            return self.dimensions.width
        return self.dimensions.height


# ============================================================
# Parsing
# ============================================================

# Field name -> source key, per wire shape.
_SNAKE_KEYS = {
    "position": "position_ft", "width": "width_ft", "height": "height_ft",
    "distance_from_floor": "distance_from_floor_ft", "depth": "depth_ft",
    "swing_direction": "swing_direction", "door_type": "door_type",
    "opens_to": "opens_to", "notes": "notes",
}
_CAMEL_KEYS = {
    "position": "position", "width": "width", "height": "height",
    "distance_from_floor": "distanceFromFloor", "depth": "depth",
    "swing_direction": "swingDirection", "door_type": "doorType",
    "opens_to": "opensTo", "notes": "notes",
}

_FEATURE_ALIASES = {"closet-door": "closet"}


def _float(raw: Mapping, key: str, default: float = 0.0) -> float:
    """Read a numeric field; None or absent gives *default*."""
    value = raw.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        raise AnalysisError(f"{key} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise AnalysisError(f"{key} must be a number, got {value!r}") from None


def _parse_feature(raw, keys: dict[str, str]) -> Feature:
    if not isinstance(raw, Mapping):
        raise AnalysisError(f"feature must be a mapping, got {type(raw).__name__}")
    kind = raw.get("type")
    kind = _FEATURE_ALIASES.get(kind, kind)
    notes = raw.get(keys["notes"]) or ""

    if kind == "door":
        return DoorFeature(
            position=_float(raw, keys["position"]),
            width=_float(raw, keys["width"]),
            height=_float(raw, keys["height"]),
            distance_from_floor=_float(raw, keys["distance_from_floor"]),
            swing_direction=raw.get(keys["swing_direction"]),
            door_type=raw.get(keys["door_type"]),
            opens_to=raw.get(keys["opens_to"]),
            notes=notes,
        )
    if kind == "window":
        return WindowFeature(
            position=_float(raw, keys["position"]),
            width=_float(raw, keys["width"]),
            height=_float(raw, keys["height"]),
            distance_from_floor=_float(raw, keys["distance_from_floor"]),
            notes=notes,
        )
    if kind == "closet":
        return ClosetFeature(
            position=_float(raw, keys["position"]),
            width=_float(raw, keys["width"]),
            height=_float(raw, keys["height"]),
            depth=_float(raw, keys["depth"], DEFAULT_CLOSET_DEPTH),
            door_type=raw.get(keys["door_type"]),
            notes=notes,
        )
    # Unknown kinds are kept uncoerced; they are never measured.
    return OtherFeature(str(kind), raw.get(keys["position"]), raw.get(keys["width"]), notes)


def _parse_walls(raw_walls, keys: dict[str, str]) -> dict[Wall, tuple[Feature, ...]]:
    if not isinstance(raw_walls, Mapping):
        raise AnalysisError("analysis has no walls mapping")
    missing = [w for w in WALLS if w not in raw_walls]
    if missing:
        raise AnalysisError(f"analysis is missing walls: {', '.join(missing)}")
    extra = sorted(set(raw_walls) - set(WALLS))
    if extra:
        logger.warning("ignoring unknown wall keys: %s", ", ".join(map(str, extra)))
    return {w: tuple(_parse_feature(f, keys) for f in (raw_walls[w] or [])) for w in WALLS}


def _parse_dimensions(raw, width_key: str, height_key: str) -> Dimensions:
    if not isinstance(raw, Mapping):
        raise AnalysisError("analysis has no dimensions")
    if raw.get(width_key) is None or raw.get(height_key) is None:
        raise AnalysisError(f"dimensions need {width_key} and {height_key}")
    return Dimensions(
        width=_float(raw, width_key),
        height=_float(raw, height_key),
        confidence=_float(raw, "confidence"),
    )


def parse_analysis_response(raw_json) -> RoomAnalysis:
    """Convert a snake_case model response (JSON text or mapping) to a RoomAnalysis."""
    raw_text = raw_json if isinstance(raw_json, str) else None
    if isinstance(raw_json, (str, bytes)):
        try:
            raw = json.loads(raw_json)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise AnalysisError(f"analysis response is not valid JSON: {e}") from e
    else:
        raw = raw_json
    if not isinstance(raw, Mapping):
        raise AnalysisError("analysis response must be a JSON object")

    ref = raw.get("reference_object")
    reference = None
    if isinstance(ref, Mapping):
        reference = ReferenceObject(
            type=ref.get("type", ""),
            known_size=ref.get("known_height_inches"),
        )

    return RoomAnalysis(
        dimensions=_parse_dimensions(raw.get("dimensions"), "width_ft", "height_ft"),
        walls=_parse_walls(raw.get("walls"), _SNAKE_KEYS),
        ceiling_height=_float(raw, "ceiling_height_ft"),
        reference_object=reference,
        # Mappings may hold Decimal or other non-JSON numbers from a document store.
        raw_response=raw_text if raw_text is not None else json.dumps(raw, sort_keys=True, default=str),
    )


def analysis_from_dict(data: Mapping) -> RoomAnalysis:
    """Convert a camelCase session-store record to a RoomAnalysis."""
    if not isinstance(data, Mapping):
        raise AnalysisError("analysis must be a mapping")

    ref = data.get("referenceObject")
    reference = None
    if isinstance(ref, Mapping):
        reference = ReferenceObject(
            type=ref.get("type", ""),
            known_size=ref.get("knownSize"),
            detected_size=ref.get("detectedSize"),
            scale_factor=ref.get("scaleFactor"),
        )

    return RoomAnalysis(
        dimensions=_parse_dimensions(data.get("dimensions"), "width", "height"),
        walls=_parse_walls(data.get("walls"), _CAMEL_KEYS),
        ceiling_height=_float(data, "ceilingHeight"),
        reference_object=reference,
        raw_response=data.get("rawResponse"),
    )


# ============================================================
# Validation
# ============================================================

def _is_measure(value) -> bool:
    """A finite int or float (bools excluded)."""
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


def validate_analysis(analysis: RoomAnalysis) -> None:
    """Raise AnalysisError unless every drawable feature fits its wall.

    Unknown feature kinds are not checked.
    """
    dims = analysis.dimensions
    if dims is None:
        raise AnalysisError("analysis has no dimensions")
    for name, value in (("width", dims.width), ("height", dims.height)):
        if not _is_measure(value) or value <= 0:
            raise AnalysisError(f"room {name} must be positive, got {value!r}")

    missing = [w for w in WALLS if w not in analysis.walls]
    if missing:
        raise AnalysisError(f"analysis is missing walls: {', '.join(missing)}")

    for wall in WALLS:
        length = analysis.wall_length(wall)
        for i, f in enumerate(analysis.walls[wall]):
            if isinstance(f, OtherFeature):
                continue
            where = f"{wall} wall feature {i} ({f.kind})"
            if not _is_measure(f.width) or f.width <= 0:
                raise AnalysisError(f"{where}: width must be positive, got {f.width!r}")
            if not _is_measure(f.position) or f.position < 0:
                raise AnalysisError(f"{where}: position must be >= 0, got {f.position!r}")
            if f.position + f.width > length + POSITION_TOLERANCE:
                raise AnalysisError(
                    f"{where}: span {f.position:g}-{f.position + f.width:g} ft"
                    f" exceeds wall length {length:g} ft")
            if isinstance(f, ClosetFeature) and (not _is_measure(f.depth) or f.depth <= 0):
                raise AnalysisError(f"{where}: depth must be positive, got {f.depth!r}")
            if isinstance(f, DoorFeature) and f.swing_direction not in SWING_DIRECTIONS:
                raise AnalysisError(
                    f"{where}: unknown swing direction {f.swing_direction!r}")
