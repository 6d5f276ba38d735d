from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from termplot.raster.geometry import CanvasGeometry


# Opaque to the canvas; only renderers and stylers interpret it.
Color: TypeAlias = Any


@dataclass(frozen=True)
class Hit:
    sequence: int
    color: Color = None


# Indexed [py][px]; each entry lists the hits of one pixel in draw order.
HitGrid: TypeAlias = list[list[list[Hit]]]


def new_hit_grid(geometry: CanvasGeometry) -> HitGrid:
    return [[[] for _ in range(geometry.pixel_width)] for _ in range(geometry.pixel_height)]


def copy_hit_grid(grid: HitGrid) -> HitGrid:
    """Value copy of a hit grid.

    Hits are frozen, so fresh lists at every level leave nothing shared with
    the source that a later append could reach.
    """
    return [[list(cell) for cell in row] for row in grid]


def cell_hits(grid: HitGrid, geometry: CanvasGeometry, cx: int, cy: int) -> HitGrid:
    """Sub-grid of one character cell, indexed [j][i] within the cell."""
    xpc = geometry.x_pixels_per_char
    ypc = geometry.y_pixels_per_char
    rows = grid[cy * ypc : (cy + 1) * ypc]
    return [row[cx * xpc : (cx + 1) * xpc] for row in rows]
