"""Parameter limits, defaults, and drawing constants.

All lengths in millimetres unless noted.
"""

# Parameter ranges (inclusive) and input steps
PARAM_LIMITS = {
    "length":         (1000.0, 50000.0),
    "width":          (1000.0, 50000.0),
    "depth":          (200.0, 5000.0),
    "wall_thickness": (100.0, 1000.0),
    "rebar_spacing":  (100.0, 500.0),
    "rebar_diameter": (6.0, 40.0),
    "cover_concrete": (25.0, 100.0),
}

PARAM_STEPS = {
    "length": 100.0,
    "width": 100.0,
    "depth": 50.0,
    "wall_thickness": 10.0,
    "rebar_spacing": 10.0,
    "rebar_diameter": 2.0,
    "cover_concrete": 5.0,
}

PARAM_LABELS = {
    "length": "Length (mm)",
    "width": "Width (mm)",
    "depth": "Depth (mm)",
    "wall_thickness": "Wall Thickness (mm)",
    "rebar_spacing": "Rebar Spacing (mm)",
    "rebar_diameter": "Rebar Ø (mm)",
    "cover_concrete": "Concrete Cover (mm)",
}

# Starting configuration
DEFAULTS = {
    "length": 8000.0,
    "width": 6000.0,
    "depth": 1200.0,
    "wall_thickness": 300.0,
    "rebar_spacing": 200.0,
    "rebar_diameter": 16.0,
    "cover_concrete": 50.0,
}

VIEWS = ("plan", "section")

# Plan view
PLAN_SCALE = 0.05                 # SVG px per mm
PLAN_ORIGIN = (50.0, 50.0)        # drawing offset inside the canvas (px)
PLAN_PAD_W = 300                  # canvas room right of the drawing (px)
PLAN_PAD_H = 100                  # canvas room below the drawing (px)
PLAN_DIM_OFFSET = 30              # dimension line distance from the outline (px)

# Section view
SECTION_MAX_WIDTH = 2000.0        # widest cut-out shown
SECTION_TARGET_PX = 250.0         # cut-out drawn at this width (px)
SECTION_ORIGIN = (150.0, 50.0)
SECTION_PAD_W = 350
SECTION_PAD_H = 150
SECTION_HATCH_PX = 30             # hatched band at each cut edge (px)
SECTION_GROUND_PX = 100           # ground band below the footing (px)
STIRRUP_SPACING_FACTOR = 2        # stirrups at this multiple of bar spacing

# Stroke and radius factors (times diameter times scale)
PLAN_BAR_STROKE = 0.3
PLAN_NODE_RADIUS = 0.5
SECTION_BAR_RADIUS = 0.6
SECTION_STIRRUP_STROKE = 0.4

# Colours
REBAR_COLOR = "#d00"
REBAR_NODE_COLOR = "#b00"
TOP_REBAR_COLOR = "#f00"
REBAR_EDGE_COLOR = "#800"
CONCRETE_FILL = "#ddd"
COVER_COLOR = "#00f"
