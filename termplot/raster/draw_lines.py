from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from termplot.raster.draw_markers import draw_markers
from termplot.raster.geometry import CanvasGeometry
from termplot.raster.hits import Color

if TYPE_CHECKING:
    from termplot.raster.canvas import Canvas


def draw_polyline(dst: Canvas, xs: np.ndarray, ys: np.ndarray, color: Color = None) -> tuple[int, int]:
    """Connect consecutive points with DDA segments.

    Returns ``(dropped, skipped)``: hits clipped at the grid edge, and
    segments left out because an end point was not finite.
    """
    if xs.size < 2:
        return 0, 0
    dropped = 0
    skipped = 0
    for i in range(xs.size - 1):
        x1, y1, x2, y2 = float(xs[i]), float(ys[i]), float(xs[i + 1]), float(ys[i + 1])
        if not all(math.isfinite(v) for v in (x1, y1, x2, y2)):
            skipped += 1
            continue
        sx, sy = dda_samples(x1, y1, x2, y2, dst.geometry)
        dropped += draw_markers(dst, sx, sy, color=color)
    return dropped, skipped


def dda_samples(x1: float, y1: float, x2: float, y2: float, geometry: CanvasGeometry) -> tuple[np.ndarray, np.ndarray]:
    """Evenly spaced normalized samples from start to end, both inclusive.

    Neighbouring samples are at most one pixel apart along the longer pixel
    axis. A segment shorter than a pixel yields only its start point.
    """
    w = x2 - x1
    h = y2 - y1
    n = max(abs(w) * geometry.max_px, abs(h) * geometry.max_py)
    steps = int(math.ceil(n))
    if steps <= 0:
        return np.asarray([x1], dtype=np.float64), np.asarray([y1], dtype=np.float64)
    xs = np.linspace(x1, x2, steps + 1, dtype=np.float64)
    ys = np.linspace(y1, y2, steps + 1, dtype=np.float64)
    return xs, ys
