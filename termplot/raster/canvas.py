from __future__ import annotations

from collections.abc import Iterator
import logging
import threading
from typing import Any

from termplot.adapters.normalize import coerce_xy
from termplot.errors import RendererNotConfiguredError
from termplot.raster.cells import CellRenderer, PlainStyler, Styler
from termplot.raster.draw_lines import draw_polyline
from termplot.raster.draw_markers import draw_markers
from termplot.raster.geometry import CanvasGeometry
from termplot.raster.hits import Color, Hit, HitGrid, cell_hits, copy_hit_grid, new_hit_grid
from termplot.scales import map_to_pixel


LOGGER = logging.getLogger(__name__)


class Canvas:
    """Character-cell raster surface that accumulates per-pixel draw hits.

    Normalized ``(0, 0)`` is the bottom-left corner and ``(1, 1)`` the top-right.
    Rendering goes through ``drawer()``, which snapshots the grid when its
    first row is requested.
    """

    def __init__(
        self,
        width: int,
        height: int,
        x_pixels_per_char: int,
        y_pixels_per_char: int,
        *,
        renderer: CellRenderer | None = None,
        styler: Styler | None = None,
    ) -> None:
        self._geometry = CanvasGeometry(
            width=width,
            height=height,
            x_pixels_per_char=x_pixels_per_char,
            y_pixels_per_char=y_pixels_per_char,
        )
        self._renderer = renderer
        self._styler: Styler = styler if styler is not None else PlainStyler()
        self._lock = threading.Lock()
        self._counter = 0
        self._hits: HitGrid = new_hit_grid(self._geometry)

    @property
    def geometry(self) -> CanvasGeometry:
        return self._geometry

    @property
    def width(self) -> int:
        return self._geometry.width

    @property
    def height(self) -> int:
        return self._geometry.height

    @property
    def hit_counter(self) -> int:
        return self._counter

    def points(self, xs: Any, ys: Any, color: Color = None) -> Canvas:
        x_arr, y_arr = coerce_xy(xs, ys)
        dropped = draw_markers(self, x_arr, y_arr, color=color)
        if dropped:
            LOGGER.debug("Canvas clipped out-of-range hits; dropped=%d", dropped)
        return self

    def lines(self, xs: Any, ys: Any, color: Color = None) -> Canvas:
        x_arr, y_arr = coerce_xy(xs, ys)
        dropped, skipped = draw_polyline(self, x_arr, y_arr, color=color)
        if dropped:
            LOGGER.debug("Canvas clipped out-of-range hits; dropped=%d", dropped)
        if skipped:
            LOGGER.debug("Canvas skipped line segments with non-finite end points; skipped=%d", skipped)
        return self

    def record_hit(self, x: float, y: float, color: Color = None) -> bool:
        px, py = map_to_pixel(x, y, self._geometry)
        return self.record_pixel(px, py, color)

    def record_pixel(self, px: int, py: int, color: Color = None) -> bool:
        """Stamp one hit at a pixel. Returns False, storing nothing, when it is off the grid."""
        if not self._geometry.contains(px, py):
            return False
        with self._lock:
            self._counter += 1
            self._hits[py][px].append(Hit(sequence=self._counter, color=color))
        return True

    def hits_at(self, px: int, py: int) -> tuple[Hit, ...]:
        if not self._geometry.contains(px, py):
            return ()
        with self._lock:
            return tuple(self._hits[py][px])

    def snapshot(self) -> HitGrid:
        with self._lock:
            snap = copy_hit_grid(self._hits)
            counter = self._counter
        LOGGER.debug("Canvas snapshot taken; hit_counter=%d", counter)
        return snap

    def render_cell(self, hits: HitGrid) -> tuple[str, Color]:
        if self._renderer is None:
            raise RendererNotConfiguredError(f"{type(self).__name__} has no cell renderer configured")
        return self._renderer.render(hits)

    def drawer(self) -> Iterator[str]:
        """Yield ``height`` row strings, top row first.

        Nothing is copied until the first row is requested; from then on the
        iterator only sees that copy.
        """
        geometry = self._geometry
        hits = self.snapshot()
        for cy in range(geometry.height):
            row = []
            for cx in range(geometry.width):
                glyph, color = self.render_cell(cell_hits(hits, geometry, cx, cy))
                row.append(self._styler.style(glyph, color))
            yield "".join(row)

    def render(self) -> str:
        return "\n".join(self.drawer())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(counter={self._counter}, width={self.width}, height={self.height})"
