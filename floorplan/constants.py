"""Named drawing constants for the room diagram.

Room measurements are in feet; everything else is in diagram pixels.
"""

# Scale
PIXELS_PER_FOOT = 20              # one scale factor for both axes
MARGIN = 40                       # blank border on all four sides

# Walls
WALL_WIDTH = 4                    # exterior wall stroke
WALL_GAP_WIDTH = WALL_WIDTH + 2   # gap erasure is wider than the wall it cuts
WALL_COLOR = "#000"
GAP_COLOR = "#fff"

# Openings
PANE_OFFSET = 3                   # window pane lines at -3, 0, +3
SLIDING_OFFSET = 3                # sliding panels at -3, +3
DOOR_ARC_WIDTH = 1
PANE_WIDTH = 1
SLIDING_WIDTH = 1.5

# Closets
DEFAULT_CLOSET_DEPTH = 2.0        # feet, when the analysis omits depth
CLOSET_DASH = "4,2"

# Annotations
LABEL_FONT_SIZE = 12
LABEL_COLOR = "#333"
DIM_OFFSET = 14                   # dimension line distance outside the wall
DIM_TEXT_GAP = 13                 # label distance beyond the dimension line
DIM_TICK = 4                      # half-length of dimension tick marks
DIM_FONT_SIZE = 11
DIM_COLOR = "#666"
DIM_LINE_WIDTH = 0.8

# Validation
POSITION_TOLERANCE = 1e-9         # feet of slack on wall containment checks
