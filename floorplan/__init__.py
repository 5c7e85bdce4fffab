"""Room analysis to floor-plan SVG: records, mapping, renderers, and assembly."""

from .analysis import (
    AnalysisError, RoomAnalysis, Dimensions, ReferenceObject,
    DoorFeature, WindowFeature, ClosetFeature, OtherFeature,
    parse_analysis_response, analysis_from_dict, validate_analysis,
)
from .mapping import map_feature, door_swing, WALL_EDGES
from .gen_floorplan import generate_diagram, build_floorplan_data
