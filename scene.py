# scene.py
from collections import namedtuple

from config import (DDA_LINE, BRESENHAM_LINE, BRESENHAM_CIRCLE, MIDPOINT_CIRCLE,
                    ALGO_COLOR, GRID_BOX, LINE_INFO_PANEL, CIRCLE_INFO_PANEL,
                    OBSERVATIONS_PANEL)
from algorithms import dda_line, bresenham_line, bresenham_circle, midpoint_circle

RasterCache = namedtuple("RasterCache",
                         ["dda", "bresenham_line", "bresenham_circle", "midpoint_circle"])

# presentation metadata for each cached sequence, in draw order
SequencePanel = namedtuple("SequencePanel", ["key", "title", "rect", "color"])
SEQUENCE_PANELS = [
    SequencePanel("dda", "DDA Algorithm", GRID_BOX["dda"], ALGO_COLOR["dda"]),
    SequencePanel("bresenham_line", "Bresenham Line",
                  GRID_BOX["bresenham_line"], ALGO_COLOR["bresenham_line"]),
    SequencePanel("bresenham_circle", "Bresenham Circle",
                  GRID_BOX["bresenham_circle"], ALGO_COLOR["bresenham_circle"]),
    SequencePanel("midpoint_circle", "Midpoint Circle",
                  GRID_BOX["midpoint_circle"], ALGO_COLOR["midpoint_circle"]),
]

SECTION_HEADINGS = [
    (350, 800, "LINE DRAWING ALGORITHMS", (0.8, 0.9, 1.0)),
    (330, 510, "CIRCLE DRAWING ALGORITHMS", (1.0, 0.7, 0.9)),
]

# (rect, border color, title, [(text, color, indent), ...])
InfoPanel = namedtuple("InfoPanel", ["rect", "color", "title", "lines"])
INFO_PANELS = [
    InfoPanel(LINE_INFO_PANEL, (0.3, 0.8, 1.0), "LINE ALGORITHMS", [
        ("DDA (Digital Differential Analyzer)", (0.7, 0.85, 1.0), 30),
        ("Floating-point calculations", (0.5, 0.7, 0.9), 50),
        ("Simple but slower", (0.5, 0.7, 0.9), 50),
        ("Bresenham Line Algorithm", (0.5, 1.0, 0.6), 30),
        ("Integer-only arithmetic", (0.4, 0.8, 0.5), 50),
        ("Faster & more efficient", (0.4, 0.8, 0.5), 50),
        ("Industry standard", (0.4, 0.8, 0.5), 50),
    ]),
    InfoPanel(CIRCLE_INFO_PANEL, (1.0, 0.4, 0.8), "CIRCLE ALGORITHMS", [
        ("Bresenham Circle Algorithm", (1.0, 0.6, 0.9), 30),
        ("Integer decision parameter", (0.9, 0.5, 0.8), 50),
        ("8-way symmetry optimization", (0.9, 0.5, 0.8), 50),
        ("Midpoint Circle Algorithm", (0.6, 0.8, 1.0), 30),
        ("Implicit circle equation", (0.5, 0.7, 0.9), 50),
        ("Similar efficiency", (0.5, 0.7, 0.9), 50),
        ("Simpler decision logic", (0.5, 0.7, 0.9), 50),
    ]),
    InfoPanel(OBSERVATIONS_PANEL, (1.0, 0.8, 0.2), "KEY OBSERVATIONS", [
        ("Integer algorithms avoid rounding errors and are faster", (0.9, 0.9, 0.7), 30),
        ("Circle algorithms use 8-way symmetry (plot 8 points per iteration)", (0.9, 0.9, 0.7), 30),
        ("Bresenham algorithms are hardware-optimized", (0.9, 0.9, 0.7), 30),
        ("All produce pixel-perfect results", (0.9, 0.9, 0.7), 30),
    ]),
]


def build_raster_cache(dda=DDA_LINE, line=BRESENHAM_LINE,
                       bresenham=BRESENHAM_CIRCLE, midpoint=MIDPOINT_CIRCLE):
    """Run each rasterizer once. dda/line are (x1, y1, x2, y2),
    bresenham/midpoint are (xc, yc, r)."""
    return RasterCache(
        dda=dda_line(*dda),
        bresenham_line=bresenham_line(*line),
        bresenham_circle=bresenham_circle(*bresenham),
        midpoint_circle=midpoint_circle(*midpoint),
    )


def point_counter_label(shown, total):
    return f"Points: {shown}/{total}"
