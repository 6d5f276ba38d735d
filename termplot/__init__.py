from termplot.errors import PlotDataError, RendererNotConfiguredError, TermplotError
from termplot.raster import Canvas, CanvasGeometry, CellRenderer, Hit, PlainStyler, Styler, latest_hit

__all__ = [
    "Canvas",
    "CanvasGeometry",
    "CellRenderer",
    "Hit",
    "PlainStyler",
    "PlotDataError",
    "RendererNotConfiguredError",
    "Styler",
    "TermplotError",
    "latest_hit",
]
