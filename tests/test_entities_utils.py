import unittest
from enum import Enum

from entities_utils import (
    check_collision,
    wrap_position,
    circular_distances,
    checked_transition,
    sector_polygon,
    InvalidStateTransition,
)


class _Light(Enum):
    RED = 1
    GREEN = 2


class CollisionTests(unittest.TestCase):
    def test_touching_circles_collide(self):
        self.assertTrue(check_collision((0.0, 0.0), 5.0, (10.0, 0.0), 5.0))

    def test_separated_circles_do_not_collide(self):
        self.assertFalse(check_collision((0.0, 0.0), 5.0, (10.01, 0.0), 5.0))

    def test_uses_both_axes(self):
        self.assertTrue(check_collision((0.0, 0.0), 3.0, (3.0, 4.0), 2.0))
        self.assertFalse(check_collision((0.0, 0.0), 3.0, (3.0, 4.0), 1.9))


class WrapTests(unittest.TestCase):
    def test_overshoot_snaps_to_zero(self):
        self.assertEqual(wrap_position(1630.0, 1280), 0.0)

    def test_undershoot_snaps_to_far_edge(self):
        self.assertEqual(wrap_position(-0.5, 1280), 1280.0)

    def test_inside_and_boundary_unchanged(self):
        self.assertEqual(wrap_position(640.0, 1280), 640.0)
        self.assertEqual(wrap_position(1280.0, 1280), 1280.0)
        self.assertEqual(wrap_position(0.0, 1280), 0.0)


class CircularDistanceTests(unittest.TestCase):
    def test_distances_are_normalised(self):
        dist_r, dist_l = circular_distances(1000.0, 100.0, 1280)
        self.assertEqual(dist_r, 380.0)
        self.assertEqual(dist_l, 900.0)

    def test_opposite_points_tie(self):
        dist_r, dist_l = circular_distances(0.0, 640.0, 1280)
        self.assertEqual(dist_r, dist_l)


class TransitionGuardTests(unittest.TestCase):
    allowed = {_Light.RED: {_Light.GREEN}, _Light.GREEN: set()}

    def test_allowed_transition_returns_target(self):
        self.assertIs(checked_transition(_Light.RED, _Light.GREEN, self.allowed, "light"), _Light.GREEN)

    def test_disallowed_transition_raises(self):
        with self.assertRaises(InvalidStateTransition):
            checked_transition(_Light.GREEN, _Light.RED, self.allowed, "light")

    def test_foreign_value_raises_value_error(self):
        with self.assertRaises(ValueError):
            checked_transition(_Light.RED, "GREEN", self.allowed, "light")


class SectorPolygonTests(unittest.TestCase):
    def test_starts_at_center(self):
        pts = sector_polygon((10.0, 20.0), 5.0, 0, 90, segments=4)
        self.assertEqual(len(pts), 6)
        self.assertEqual(pts[0], (10.0, 20.0))
        # 0° points down, 90° points right
        self.assertAlmostEqual(pts[1][1], 25.0)
        self.assertAlmostEqual(pts[-1][0], 15.0)


if __name__ == "__main__":
    unittest.main()
