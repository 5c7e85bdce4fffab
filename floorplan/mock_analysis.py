"""Simulated room analysis, standing in for the vision-model client.

MOCK_ROOM_ANALYSIS is shaped like the model's snake_case response.
analyze_room walks the same progress stages a real client reports and
returns the parsed record.
"""
import logging
import time

from floorplan.analysis import RoomAnalysis, parse_analysis_response

logger = logging.getLogger(__name__)

# 12' x 14' bedroom
MOCK_ROOM_ANALYSIS = {
    "dimensions": {"width_ft": 12.0, "height_ft": 14.0, "confidence": 0.7},
    "ceiling_height_ft": 8.0,
    "walls": {
        "north": [
            {
                "type": "window",
                "position_ft": 4.0,
                "width_ft": 4.0,
                "height_ft": 4.0,
                "distance_from_floor_ft": 3.0,
                "notes": "Double-hung window with blinds",
            },
        ],
        "east": [
            {
                "type": "closet",
                "position_ft": 3.0,
                "width_ft": 6.0,
                "depth_ft": 2.0,
                "door_type": "sliding",
                "notes": "Sliding door closet, reach-in style",
            },
        ],
        "south": [
            {
                "type": "door",
                "position_ft": 8.0,
                "width_ft": 2.67,
                "height_ft": 6.67,
                "swing_direction": "right",
                "opens_to": "hallway",
                "notes": "Standard interior door, swings into hallway",
            },
        ],
        "west": [
            {
                "type": "window",
                "position_ft": 4.0,
                "width_ft": 3.5,
                "height_ft": 3.5,
                "distance_from_floor_ft": 3.0,
                "notes": "Single window with curtains",
            },
        ],
    },
    "reference_object": {
        "type": "door",
        "wall": "south",
        "known_height_inches": 80,
        "notes": "Used standard door height for scale calibration",
    },
    "shape": "rectangle",
    "notes": "Standard rectangular bedroom. Carpet flooring. One overhead light fixture centered.",
}

# (stage name, seconds)
PROGRESS_STAGES = [
    ("uploading", 0.4),
    ("dimensions", 0.8),
    ("features", 0.7),
    ("generating", 0.6),
]


def analyze_room(on_progress=None, sleep=time.sleep) -> RoomAnalysis:
    """Simulate a model analysis, calling on_progress(stage, index) per stage."""
    for i, (stage, delay) in enumerate(PROGRESS_STAGES):
        logger.debug("analysis stage %d/%d: %s", i + 1, len(PROGRESS_STAGES), stage)
        if on_progress is not None:
            on_progress(stage, i)
        sleep(delay)
    return parse_analysis_response(MOCK_ROOM_ANALYSIS)
