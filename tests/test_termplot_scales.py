from __future__ import annotations

import unittest

import numpy as np

from termplot.raster import CanvasGeometry, dda_samples
from termplot.scales import in_bounds, map_to_pixel, map_to_pixels, round_half_away


class RoundingTests(unittest.TestCase):
    def test_ties_round_away_from_zero(self) -> None:
        values = np.asarray([0.5, 1.5, 2.5, -0.5, -2.5, 0.49999999999999994, 2.4999])
        self.assertEqual(round_half_away(values).tolist(), [1.0, 2.0, 3.0, -1.0, -3.0, 0.0, 2.0])


class PixelMappingTests(unittest.TestCase):
    def test_corners_map_to_grid_corners(self) -> None:
        geometry = CanvasGeometry(width=10, height=5, x_pixels_per_char=2, y_pixels_per_char=4)
        self.assertEqual(map_to_pixel(0.0, 0.0, geometry), (0, 19))
        self.assertEqual(map_to_pixel(1.0, 1.0, geometry), (19, 0))
        self.assertEqual(map_to_pixel(0.0, 1.0, geometry), (0, 0))
        self.assertEqual(map_to_pixel(1.0, 0.0, geometry), (19, 19))

    def test_half_pixel_boundary_rounds_up(self) -> None:
        # 0.5 * (6 - 1) = 2.5, which banker's rounding would send to 2.
        geometry = CanvasGeometry(width=6, height=1)
        self.assertEqual(map_to_pixel(0.5, 1.0, geometry), (3, 0))
        geometry = CanvasGeometry(width=3, height=1)
        self.assertEqual(map_to_pixel(0.25, 1.0, geometry), (1, 0))

    def test_unit_square_stays_in_bounds(self) -> None:
        geometry = CanvasGeometry(width=13, height=7, x_pixels_per_char=2, y_pixels_per_char=4)
        grid = np.linspace(0.0, 1.0, 101)
        xs, ys = np.meshgrid(grid, grid)
        px, py = map_to_pixels(xs.ravel(), ys.ravel(), geometry)
        self.assertTrue(np.all(in_bounds(px, py, geometry)))
        self.assertEqual(int(px.max()), geometry.max_px)
        self.assertEqual(int(py.max()), geometry.max_py)

    def test_out_of_range_and_non_finite_fall_outside(self) -> None:
        geometry = CanvasGeometry(width=4, height=4)
        xs = np.asarray([-0.5, 2.0, np.nan, np.inf, -np.inf, 1e300, 0.5])
        ys = np.asarray([0.5, 0.5, 0.5, 0.5, 0.5, 0.5, 1.5])
        px, py = map_to_pixels(xs, ys, geometry)
        self.assertFalse(np.any(in_bounds(px, py, geometry)))

    def test_single_pixel_axis_collapses_to_zero(self) -> None:
        geometry = CanvasGeometry(width=1, height=1)
        self.assertEqual(map_to_pixel(0.7, 0.2, geometry), (0, 0))


class DDASampleTests(unittest.TestCase):
    def test_samples_include_both_end_points(self) -> None:
        geometry = CanvasGeometry(width=8, height=3, x_pixels_per_char=2, y_pixels_per_char=4)
        xs, ys = dda_samples(0.1, 0.9, 0.8, 0.2, geometry)
        self.assertEqual((xs[0], ys[0]), (0.1, 0.9))
        self.assertEqual((xs[-1], ys[-1]), (0.8, 0.2))

    def test_step_count_follows_longer_pixel_axis(self) -> None:
        geometry = CanvasGeometry(width=11, height=3)
        xs, _ = dda_samples(0.0, 0.0, 1.0, 1.0, geometry)
        self.assertEqual(xs.size, 11)
        _, ys = dda_samples(0.0, 0.0, 0.0, 1.0, geometry)
        self.assertEqual(ys.size, 3)

    def test_sub_pixel_segment_yields_start_point_only(self) -> None:
        geometry = CanvasGeometry(width=4, height=4)
        xs, ys = dda_samples(0.25, 0.25, 0.25, 0.25, geometry)
        self.assertEqual((xs.tolist(), ys.tolist()), ([0.25], [0.25]))

    def test_fractional_extent_rounds_step_count_up(self) -> None:
        geometry = CanvasGeometry(width=8, height=1)
        xs, _ = dda_samples(0.0, 0.0, 0.5, 0.0, geometry)
        # 0.5 * 7 = 3.5 pixels -> 4 steps, 5 samples.
        self.assertEqual(xs.size, 5)
        px, _ = map_to_pixels(xs, np.zeros_like(xs), geometry)
        self.assertEqual(px.tolist(), [0, 1, 2, 3, 4])


if __name__ == "__main__":
    unittest.main()
