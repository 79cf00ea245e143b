"""
Tests for services.hue – hue wrapping, fine adjustments, harmonies.
"""

import math
import unittest

from huewheel.core.models import FINE_OFFSETS, HARMONY_OFFSETS
from huewheel.services.hue import HueService, shift_hue, wrap_unit


def _circular_distance(a, b):
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


class TestShiftHue(unittest.TestCase):
    """shift_hue() wraps into [0, 1)."""

    def test_half_turn(self):
        self.assertEqual(shift_hue(0.0, 180), 0.5)

    def test_wraps_past_one(self):
        self.assertLess(_circular_distance(shift_hue(0.9, 36), 0.0), 1e-9)

    def test_full_turns_are_noops(self):
        self.assertAlmostEqual(shift_hue(0.1, -720), 0.1, places=9)
        self.assertAlmostEqual(shift_hue(0.1, 1080), 0.1, places=9)

    def test_negative_offset(self):
        self.assertAlmostEqual(shift_hue(0.0, -90), 0.75)

    def test_zero_offset(self):
        self.assertEqual(shift_hue(0.3, 0), 0.3)

    def test_range_invariant(self):
        for base in (0.0, 0.001, 0.25, 0.5, 0.999999):
            for off in (-1000.5, -360, -180, -1, -0.25, 0, 0.25, 1, 179.9, 360, 7777):
                h = shift_hue(base, off)
                self.assertGreaterEqual(h, 0.0)
                self.assertLess(h, 1.0)


class TestWrapUnit(unittest.TestCase):

    def test_tiny_negative_does_not_return_one(self):
        self.assertEqual(wrap_unit(-1e-18), 0.0)

    def test_non_finite(self):
        self.assertEqual(wrap_unit(math.nan), 0.0)
        self.assertEqual(wrap_unit(math.inf), 0.0)

    def test_exact_integers(self):
        self.assertEqual(wrap_unit(1.0), 0.0)
        self.assertEqual(wrap_unit(-3.0), 0.0)


class TestHueService(unittest.TestCase):
    """Swatch strips."""

    def setUp(self):
        self.svc = HueService()

    def test_fine_offsets(self):
        swatches = self.svc.fine_adjustments(0.5, 0.8)
        self.assertEqual([s.offset_degrees for s in swatches], list(FINE_OFFSETS))
        self.assertEqual(len(swatches), 9)

    def test_fine_center_is_current_hue(self):
        swatches = self.svc.fine_adjustments(0.5, 0.8)
        center = swatches[4]
        self.assertEqual(center.offset_degrees, 0.0)
        self.assertEqual(center.hue, 0.5)

    def test_fine_wraps_below_zero(self):
        left = self.svc.fine_adjustments(0.0, 1.0)[0]
        self.assertAlmostEqual(left.hue, 1.0 - 1.0 / 360)

    def test_harmony_offsets(self):
        swatches = self.svc.harmonies(0.0, 1.0)
        self.assertEqual([s.offset_degrees for s in swatches], list(HARMONY_OFFSETS))
        hues = [s.hue for s in swatches]
        self.assertAlmostEqual(hues[0], 0.5)
        self.assertAlmostEqual(hues[1], 1 / 3)
        self.assertAlmostEqual(hues[2], 2 / 3)
        self.assertAlmostEqual(hues[3], 1 / 12)
        self.assertAlmostEqual(hues[4], 11 / 12)

    def test_brightness_held_constant(self):
        for sw in self.svc.harmonies(0.2, 0.37) + self.svc.fine_adjustments(0.2, 0.37):
            self.assertEqual(sw.brightness, 0.37)

    def test_swatch_hex(self):
        comp = self.svc.harmonies(0.0, 1.0)[0]
        self.assertEqual(comp.hex, "#00FFFF")
        self.assertEqual(comp.name, "Complementary")

    def test_fine_swatch_name(self):
        self.assertEqual(self.svc.fine_adjustments(0.0, 1.0)[0].name, "-1°")

    def test_custom_offsets(self):
        svc = HueService(fine_offsets=(-5, 5), harmony_offsets=(90,))
        self.assertEqual(len(svc.fine_adjustments(0, 1)), 2)
        self.assertAlmostEqual(svc.harmonies(0, 1)[0].hue, 0.25)


if __name__ == '__main__':
    unittest.main()
