# config.py
SCREEN_W = 1600
SCREEN_H = 900
FPS = 60
WINDOW_TITLE = "Algorithm Visualization - Computer Graphics Assignment"

# Animation
MAX_STEPS = 150      # ticks for a full reveal of every sequence
TICK_MS = 50         # one animation tick every 50 ms

# Scene inputs (screen coordinates, origin bottom-left)
DDA_LINE = (100, 630, 350, 720)
BRESENHAM_LINE = (500, 630, 750, 720)
BRESENHAM_CIRCLE = (225, 385, 80)    # (xc, yc, r)
MIDPOINT_CIRCLE = (625, 385, 80)

# Points
POINT_SIZE = 4.0
HEAD_POINT_SIZE = 6.0   # most recently revealed point
GLOW_ALPHA = 0.3
TRAIL_ALPHA = 0.7

# Colors (normalized floats 0..1)
BACKGROUND = (0.12, 0.14, 0.18)
GRID_BG = (0.95, 0.95, 0.96)
GRID_LINE = (0.88, 0.88, 0.90)
GRID_DIVISIONS = 20
PANEL_BG = (0.18, 0.20, 0.25)
PROGRESS_BG = (0.20, 0.25, 0.30)
ACCENT = (0.30, 0.80, 1.00)
PAUSED_COLOR = (1.00, 0.30, 0.30)
CONTROLS_COLOR = (0.50, 0.70, 0.90)

ALGO_COLOR = {
    "dda":              (0.20, 0.60, 1.00),
    "bresenham_line":   (0.10, 0.80, 0.20),
    "bresenham_circle": (1.00, 0.20, 0.60),
    "midpoint_circle":  (0.20, 0.60, 1.00),
}

# Layout rectangles (x, y, w, h)
GRID_BOX = {
    "dda":              (50, 550, 350, 230),
    "bresenham_line":   (450, 550, 350, 230),
    "bresenham_circle": (50, 270, 350, 230),
    "midpoint_circle":  (450, 270, 350, 230),
}
PROGRESS_BAR = (50, 835, 1500, 15)
LINE_INFO_PANEL = (850, 550, 700, 230)
CIRCLE_INFO_PANEL = (850, 270, 700, 230)
OBSERVATIONS_PANEL = (50, 50, 1500, 190)

# Fonts (pygame default font, pixel heights)
FONT_SMALL = 18
FONT_BIG = 24
