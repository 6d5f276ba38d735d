from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from termplot.raster.hits import Color
from termplot.scales import in_bounds, map_to_pixels

if TYPE_CHECKING:
    from termplot.raster.canvas import Canvas


def draw_markers(dst: Canvas, xs: np.ndarray, ys: np.ndarray, color: Color = None) -> int:
    """Record one hit per point, in input order. Returns how many were clipped."""
    px, py = map_to_pixels(xs, ys, dst.geometry)
    keep = in_bounds(px, py, dst.geometry)
    for x, y in zip(px[keep].tolist(), py[keep].tolist(), strict=True):
        dst.record_pixel(x, y, color)
    return int(px.size - np.count_nonzero(keep))
