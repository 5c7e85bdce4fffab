"""Generate a room floor-plan SVG from a room analysis.

Pipeline: analysis record -> validation -> per-wall feature dispatch
(mapping + renderers) -> room assembler -> SVG string. Pure and
deterministic; the same (analysis, label, id) always yields the same
bytes.
"""
import argparse
import json
import logging
import os
import sys
from collections.abc import Mapping
from typing import NamedTuple

from shared.types import WALLS
from floorplan.constants import PIXELS_PER_FOOT
from floorplan.analysis import (
    AnalysisError, RoomAnalysis, OtherFeature,
    analysis_from_dict, parse_analysis_response, validate_analysis,
)
from floorplan.openings import render_door, render_window, render_closet
from floorplan.assembler import FEATURE_GROUPS, render_room_svg
from floorplan.mock_analysis import MOCK_ROOM_ANALYSIS

logger = logging.getLogger(__name__)

# Feature kind -> (group name, renderer)
FEATURE_RENDERERS = {
    "door":   ("doors", render_door),
    "window": ("windows", render_window),
    "closet": ("closets", render_closet),
}


class FloorplanData(NamedTuple):
    """Intermediate result: room size and per-group feature fragments."""
    width_ft: float
    height_ft: float
    room_width_px: float
    room_height_px: float
    groups: dict[str, list[str]]
    skipped: list[tuple[str, str]]   # (wall, feature type) of undrawn features


# ============================================================
# Pipeline
# ============================================================

def normalize_analysis(analysis) -> RoomAnalysis:
    """Accept a RoomAnalysis or a camelCase store mapping."""
    if isinstance(analysis, RoomAnalysis):
        return analysis
    if isinstance(analysis, Mapping):
        return analysis_from_dict(analysis)
    raise AnalysisError(f"expected a room analysis, got {type(analysis).__name__}")


def build_floorplan_data(analysis) -> FloorplanData:
    """Validate the analysis and render every known feature into its group.

    Raises AnalysisError before anything is rendered if the analysis is invalid.
    """
    analysis = normalize_analysis(analysis)
    validate_analysis(analysis)

    dims = analysis.dimensions
    room_width_px = dims.width * PIXELS_PER_FOOT
    room_height_px = dims.height * PIXELS_PER_FOOT

    groups: dict[str, list[str]] = {name: [] for name in FEATURE_GROUPS}
    skipped: list[tuple[str, str]] = []
    for wall in WALLS:
        for feature in analysis.walls[wall]:
            entry = None if isinstance(feature, OtherFeature) else FEATURE_RENDERERS.get(feature.kind)
            if entry is None:
                logger.info("skipping unsupported feature type %r on %s wall", feature.kind, wall)
                skipped.append((wall, feature.kind))
                continue
            group, render = entry
            groups[group].append(render(feature, wall, room_width_px, room_height_px))

    logger.debug("diagram %gx%g ft: %d doors, %d windows, %d closets, %d skipped",
                 dims.width, dims.height, len(groups["doors"]), len(groups["windows"]),
                 len(groups["closets"]), len(skipped))
    return FloorplanData(dims.width, dims.height, room_width_px, room_height_px, groups, skipped)


def render_floorplan_svg(data: FloorplanData, room_label: str, room_id: str) -> str:
    return render_room_svg(data.width_ft, data.height_ft, data.groups, room_label, room_id)


def generate_diagram(analysis, room_label: str, room_id: str) -> str:
    """Room analysis -> complete SVG diagram string."""
    return render_floorplan_svg(build_floorplan_data(analysis), room_label, room_id)


# ============================================================
# Main entry point
# ============================================================

def _load_analysis(path: str | None, camel: bool) -> RoomAnalysis:
    if path is None:
        return parse_analysis_response(MOCK_ROOM_ANALYSIS)
    with open(path, encoding="utf-8") as f:
        text = f.read()
    if not camel:
        return parse_analysis_response(text)
    try:
        return analysis_from_dict(json.loads(text))
    except json.JSONDecodeError as e:
        raise AnalysisError(f"{path} is not valid JSON: {e}") from e


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Render a room analysis as a floor-plan SVG.")
    parser.add_argument("analysis", nargs="?",
                        help="analysis JSON file (default: built-in sample bedroom)")
    parser.add_argument("-o", "--output", help="SVG path (default: <room-id>.svg)")
    parser.add_argument("--label", default="Bedroom#1", help="room label")
    parser.add_argument("--room-id", default="room_sample", help="room identifier")
    parser.add_argument("--camel", action="store_true",
                        help="input uses the camelCase store schema instead of the model response")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    svg_path = args.output or f"{args.room_id}.svg"
    try:
        data = build_floorplan_data(_load_analysis(args.analysis, args.camel))
        svg_content = render_floorplan_svg(data, args.label, args.room_id)
        with open(svg_path, "w", encoding="utf-8") as f:
            f.write(svg_content)
    except (AnalysisError, OSError, UnicodeDecodeError) as e:
        logger.error("cannot generate diagram: %s", e)
        return 1

    print(f"Floorplan written to {os.path.abspath(svg_path)}")
    print(f"Room:     {data.width_ft:g}' x {data.height_ft:g}' ({data.width_ft * data.height_ft:.2f} sq ft)")
    print(f"Features: {len(data.groups['doors'])} doors, {len(data.groups['windows'])} windows,"
          f" {len(data.groups['closets'])} closets, {len(data.skipped)} skipped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
