"""
seatmap Constants

Numeric constants shared by layout generation, the coordinate transform,
the spatial index and selection presentation. All lengths in meters unless
noted otherwise.
"""

# ==================== Zoom ====================

MIN_ZOOM_SCALE = 0.5
MAX_ZOOM_SCALE = 3.0
DEFAULT_ZOOM_SCALE = 1.0

# ==================== Aspect Fit ====================

# Fraction of the viewport the cabin may occupy on each axis
VIEW_WIDTH_FILL = 0.8
VIEW_HEIGHT_FILL = 0.9

# Top margin as a fraction of viewport height
VIEW_TOP_MARGIN = 0.05

# ==================== Seat Layout ====================

PREMIUM_SEAT_PITCH_M = 0.9
STANDARD_SEAT_PITCH_M = 0.76

SEAT_LATERAL_GAP_M = 0.05
SEAT_WALL_OFFSET_M = 0.3       # First seat center inset from the cabin wall
SEAT_DEPTH_FACTOR = 0.9        # Cushion depth relative to CabinBounds.seat_depth
SEAT_CORNER_RADIUS_M = 0.08

SECTION_GAP_M = 0.5
FIRST_ROW_Y_M = 2.0

# ==================== Amenities ====================

AMENITY_WALL_INSET_M = 0.2
AMENITY_FRONT_Y_M = 0.5
AMENITY_REAR_GAP_M = 0.5

LAVATORY_WIDTH_M = 0.8
LAVATORY_DEPTH_M = 1.2
GALLEY_WIDTH_M = 1.0
GALLEY_DEPTH_M = 1.5

# ==================== Spatial Index ====================

GRID_CELL_SIZE_M = 1.0

# ==================== Selection Presentation ====================

SELECTED_SEAT_SCALE = 1.1
UNSELECTED_SEAT_SCALE = 1.0
SELECTION_TRANSITION_DURATION_S = 0.3
COLOR_SWITCH_PROGRESS = 0.5

BASE_LABEL_FONT_SIZE = 14.0
MIN_STROKE_WIDTH = 0.5
MAX_STROKE_WIDTH = 2.0

# Tolerance used when comparing transformed coordinates
COORDINATE_EPSILON = 1e-9


def clamp_zoom(scale: float) -> float:
    """Clamp a zoom factor to [MIN_ZOOM_SCALE, MAX_ZOOM_SCALE]."""
    return max(MIN_ZOOM_SCALE, min(MAX_ZOOM_SCALE, scale))
