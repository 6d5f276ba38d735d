from __future__ import annotations

import numpy as np

from termplot.adapters.normalize import coerce_xy
from termplot.raster.geometry import CanvasGeometry


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with ties away from zero (0.5 -> 1, -2.5 -> -3).

    The fractional part is compared directly instead of adding 0.5, which
    would misround 0.49999999999999994.
    """
    mag = np.abs(values)
    floor = np.floor(mag)
    rounded = floor + (mag - floor >= 0.5)
    return np.copysign(rounded, values)


def map_to_pixels(x: np.ndarray, y: np.ndarray, geometry: CanvasGeometry) -> tuple[np.ndarray, np.ndarray]:
    """Map normalized coordinates to pixel indices; y grows upward in, downward out.

    Results are not clipped into the grid. Anything out of range, non-finite
    input included, comes back as an index the grid does not contain.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        raw_x = x * geometry.max_px
        raw_y = (1.0 - y) * geometry.max_py
        px = _to_index(raw_x, geometry.pixel_width)
        py = _to_index(raw_y, geometry.pixel_height)
    return px, py


def map_to_pixel(x: float, y: float, geometry: CanvasGeometry) -> tuple[int, int]:
    x_arr, y_arr = coerce_xy([x], [y])
    px, py = map_to_pixels(x_arr, y_arr, geometry)
    return int(px[0]), int(py[0])


def in_bounds(px: np.ndarray, py: np.ndarray, geometry: CanvasGeometry) -> np.ndarray:
    return (px >= 0) & (px < geometry.pixel_width) & (py >= 0) & (py < geometry.pixel_height)


def _to_index(raw: np.ndarray, size: int) -> np.ndarray:
    # -1 and size both sit outside the grid and fit int64 whatever the input was.
    finite = np.isfinite(raw)
    rounded = round_half_away(np.where(finite, raw, -1.0))
    return np.clip(rounded, -1, size).astype(np.int64)
