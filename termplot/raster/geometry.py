from __future__ import annotations

from dataclasses import dataclass
import numbers


@dataclass(frozen=True)
class CanvasGeometry:
    """Cell and pixel dimensions of one canvas; fixed for its lifetime."""

    width: int
    height: int
    x_pixels_per_char: int = 1
    y_pixels_per_char: int = 1

    def __post_init__(self) -> None:
        for name in ("width", "height", "x_pixels_per_char", "y_pixels_per_char"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be > 0")
            object.__setattr__(self, name, int(value))

    @property
    def pixel_width(self) -> int:
        return self.width * self.x_pixels_per_char

    @property
    def pixel_height(self) -> int:
        return self.height * self.y_pixels_per_char

    @property
    def max_px(self) -> int:
        return self.pixel_width - 1

    @property
    def max_py(self) -> int:
        return self.pixel_height - 1

    def contains(self, px: int, py: int) -> bool:
        return 0 <= px < self.pixel_width and 0 <= py < self.pixel_height
