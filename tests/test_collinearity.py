import unittest

from figure_classification.models.point import Point
from figure_classification.detectors.collinearity import all_collinear


class CollinearityTests(unittest.TestCase):
    def test_fewer_than_three_points(self):
        self.assertTrue(all_collinear([]))
        self.assertTrue(all_collinear([Point(0, 0)]))
        self.assertTrue(all_collinear([Point(0, 0), Point(3, 7)]))

    def test_points_on_a_line(self):
        line = [Point(0, 0), Point(2, 1), Point(-4, -2), Point(10, 5)]
        self.assertTrue(all_collinear(line))

    def test_vertical_line(self):
        self.assertTrue(all_collinear([Point(1, 0), Point(1, 5), Point(1, -3)]))

    def test_one_point_off_the_line(self):
        self.assertFalse(all_collinear([Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 4)]))


if __name__ == "__main__":
    unittest.main()
