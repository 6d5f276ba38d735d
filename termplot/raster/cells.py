from __future__ import annotations

from typing import Protocol

from termplot.raster.hits import Color, Hit, HitGrid


class CellRenderer(Protocol):
    """Chooses what one character cell shows.

    ``hits`` holds the cell's pixels indexed ``[j][i]`` (``y_pixels_per_char``
    rows of ``x_pixels_per_char`` hit lists). Implementations must not mutate
    it and must return the same answer for the same contents.
    """

    def render(self, hits: HitGrid) -> tuple[str, Color]: ...


class Styler(Protocol):
    """Turns a glyph and its color into the text emitted for one cell."""

    def style(self, glyph: str, color: Color) -> str: ...


class PlainStyler:
    def style(self, glyph: str, color: Color = None) -> str:
        return glyph


def latest_hit(hits: HitGrid) -> Hit | None:
    """Most recently drawn hit in a cell, or None when the cell is empty."""
    return max(
        (hit for row in hits for pixel in row for hit in pixel),
        key=lambda hit: hit.sequence,
        default=None,
    )
