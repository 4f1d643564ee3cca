from __future__ import annotations

import unittest

import numpy as np

from makeplot import (
    EmptyInputError,
    PlotInputError,
    SampleSeries,
    ValueRangeError,
    Viewport,
    compute_viewport,
    normalize_samples,
)
from makeplot.scales import (
    DEGENERATE_PADDING,
    build_transform,
    format_ticks_for_axis,
    generate_nice_ticks,
    map_to_pixels,
)


def _series(pairs: list[tuple[float, float]]) -> SampleSeries:
    return SampleSeries.from_pairs(pairs)


class ViewportTests(unittest.TestCase):
    def test_squares_viewport_is_padded_by_a_tenth(self) -> None:
        viewport = compute_viewport(normalize_samples([0, 1, 4, 9, 16]))
        self.assertAlmostEqual(viewport.min_x, -0.4, places=9)
        self.assertAlmostEqual(viewport.max_x, 4.4, places=9)
        self.assertAlmostEqual(viewport.min_y, -1.6, places=9)
        self.assertAlmostEqual(viewport.max_y, 17.6, places=9)

    def test_viewport_is_order_independent(self) -> None:
        pairs = [(0.5, 3.0), (-2.0, 7.5), (4.0, -1.0), (1.0, 0.0), (3.5, 2.25)]
        forward = compute_viewport(_series(pairs))
        backward = compute_viewport(_series(list(reversed(pairs))))
        shuffled = compute_viewport(_series([pairs[i] for i in (2, 4, 0, 3, 1)]))
        self.assertEqual(forward, backward)
        self.assertEqual(forward, shuffled)

    def test_viewport_scales_linearly(self) -> None:
        pairs = [(0.5, 3.0), (-2.0, 7.5), (4.0, -1.0)]
        base = compute_viewport(_series(pairs))
        for k in (0.25, 3.0, 1000.0):
            with self.subTest(k=k):
                scaled = compute_viewport(_series([(x * k, y * k) for x, y in pairs]))
                self.assertAlmostEqual(scaled.min_x, base.min_x * k, places=6)
                self.assertAlmostEqual(scaled.max_x, base.max_x * k, places=6)
                self.assertAlmostEqual(scaled.min_y, base.min_y * k, places=6)
                self.assertAlmostEqual(scaled.max_y, base.max_y * k, places=6)

    def test_single_sample_uses_fixed_padding(self) -> None:
        viewport = compute_viewport(_series([(3.0, 5.0)]))
        self.assertEqual(viewport, Viewport(min_x=2.0, max_x=4.0, min_y=4.0, max_y=6.0))
        self.assertEqual(viewport.width, 2 * DEGENERATE_PADDING)

    def test_flat_series_pads_only_the_flat_axis(self) -> None:
        viewport = compute_viewport(normalize_samples([2, 2, 2]))
        self.assertAlmostEqual(viewport.min_x, -0.2, places=9)
        self.assertAlmostEqual(viewport.max_x, 2.2, places=9)
        self.assertEqual((viewport.min_y, viewport.max_y), (1.0, 3.0))

    def test_empty_series_is_rejected(self) -> None:
        with self.assertRaises(EmptyInputError):
            compute_viewport(_series([]))

    def test_extent_too_wide_for_floats_is_rejected(self) -> None:
        with self.assertRaises(ValueRangeError) as ctx:
            compute_viewport(normalize_samples([5e307, -5e307]))
        self.assertEqual(ctx.exception.label, "Value range too large")
        self.assertIsInstance(ctx.exception, PlotInputError)

    def test_padding_that_overflows_is_rejected(self) -> None:
        with self.assertRaises(ValueRangeError):
            compute_viewport(_series([(0.0, 1.7e308), (1.0, -1.7e308)]))

    def test_wide_but_representable_extent_is_kept(self) -> None:
        viewport = compute_viewport(_series([(0.0, 1e307), (1.0, -1e307)]))
        self.assertAlmostEqual(viewport.max_y / 1e307, 1.2, places=9)
        self.assertAlmostEqual(viewport.min_y / 1e307, -1.2, places=9)


class ScaleHelperTests(unittest.TestCase):
    def test_map_to_pixels_flips_y_and_hits_corners(self) -> None:
        viewport = Viewport(min_x=0.0, max_x=10.0, min_y=0.0, max_y=5.0)
        transform = build_transform(viewport, width=101, height=51)
        px, py = map_to_pixels(
            np.asarray([0.0, 10.0, 5.0]),
            np.asarray([0.0, 5.0, 2.5]),
            transform,
            101,
            51,
        )
        self.assertEqual(px.tolist(), [0, 100, 50])
        self.assertEqual(py.tolist(), [50, 0, 25])

    def test_build_transform_rejects_degenerate_geometry(self) -> None:
        with self.assertRaises(ValueError):
            build_transform(Viewport(0.0, 1.0, 0.0, 1.0), width=1, height=10)
        with self.assertRaises(ValueError):
            build_transform(Viewport(1.0, 1.0, 0.0, 1.0), width=10, height=10)

    def test_nice_ticks_stay_inside_range(self) -> None:
        ticks = generate_nice_ticks(-1.6, 17.6, 8)
        self.assertGreater(ticks.size, 1)
        self.assertGreaterEqual(float(ticks.min()), -1.6)
        self.assertLessEqual(float(ticks.max()), 17.6)
        self.assertIn(0.0, ticks.tolist())

    def test_range_narrower_than_one_step_has_no_ticks(self) -> None:
        ticks = generate_nice_ticks(0.1, 1.11, 2)
        self.assertEqual(ticks.size, 0)
        self.assertEqual(format_ticks_for_axis(ticks), [])

    def test_huge_values_use_exponent_labels(self) -> None:
        labels = format_ticks_for_axis(np.asarray([-1e307, 0.0, 1e307], dtype=np.float64))
        self.assertEqual(labels, ["-1.0e+307", "0", "1.0e+307"])

    def test_tick_formatting_uses_consistent_decimals_from_step(self) -> None:
        labels = format_ticks_for_axis(np.asarray([1.5, 2.0, 2.5, 3.0], dtype=np.float64))
        self.assertEqual(labels, ["1.5", "2", "2.5", "3"])

    def test_tick_formatting_snaps_near_zero(self) -> None:
        labels = format_ticks_for_axis(np.asarray([-1.0, -4.4409e-16, 1.0], dtype=np.float64))
        self.assertEqual(labels[1], "0")


if __name__ == "__main__":
    unittest.main()
