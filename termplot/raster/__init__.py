from .canvas import Canvas
from .cells import CellRenderer, PlainStyler, Styler, latest_hit
from .draw_lines import dda_samples, draw_polyline
from .draw_markers import draw_markers
from .geometry import CanvasGeometry
from .hits import Color, Hit, HitGrid

__all__ = [
    "Canvas",
    "CanvasGeometry",
    "CellRenderer",
    "Color",
    "Hit",
    "HitGrid",
    "PlainStyler",
    "Styler",
    "dda_samples",
    "draw_markers",
    "draw_polyline",
    "latest_hit",
]
