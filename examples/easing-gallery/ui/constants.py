"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
LANE_H = 44
LABEL_W = 130
CURVE_W = 80
TRACK_W = 440
STATUS_H = 36

# Orb
ORB_RADIUS = 8
TRACK_PAD = 20  # padding inside the track

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_RAIL = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

ORB_FROM = (0, 220, 220)
ORB_TO = (255, 160, 40)

# One lane per family, each showing its in_out variant unless listed otherwise
FAMILIES = [
    "linear",
    "quad_in_out",
    "cubic_in_out",
    "sine_in_out",
    "expo_in_out",
    "circ_in_out",
    "elastic_out",
    "back_in_out",
    "bounce_out",
    "smootherstep",
]

LANE_COUNT = len(FAMILIES)
SCREEN_W = LABEL_W + CURVE_W + TRACK_W
SCREEN_H = LANE_H * LANE_COUNT + STATUS_H
