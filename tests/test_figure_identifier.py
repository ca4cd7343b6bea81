import unittest
from unittest import mock

from figure_classification import config
from figure_classification.models import ColoredPoint, Edge, Point
from figure_classification.detectors.figure_identifier import classify, identify_figure
from figure_classification.detectors.point_normalizer import normalize_points


def loop(n):
    return [(i, (i + 1) % n) for i in range(n)]


SQUARE = [(0, 0), (2, 0), (2, 2), (0, 2)]
RECTANGLE = [(0, 0), (3, 0), (3, 2), (0, 2)]
RIGHT_TRIANGLE = [(0, 0), (3, 0), (0, 4)]
BOWTIE = [(0, 0), (2, 2), (2, 0), (0, 2)]
PENTAGON = [(0, 0), (4, 0), (5, 3), (2, 5), (-1, 3)]
PENTAGRAM = [(0, 0), (5, 3), (-1, 3), (4, 0), (2, 5)]
HEXAGON = [(0, 0), (2, 0), (3, 2), (2, 4), (0, 4), (-1, 2)]
HEPTAGON = [(0, 0), (3, 0), (5, 2), (5, 5), (3, 7), (0, 7), (-2, 3)]
SQUARE_WITH_MIDPOINT = [(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)]


class DegenerateFigureTests(unittest.TestCase):
    def test_single_point(self):
        self.assertEqual(classify([(3, -1)], []), "point")

    def test_repeated_point_collapses(self):
        self.assertEqual(classify([(2, 2)] * 4, loop(4)), "point")

    def test_two_distinct_points(self):
        self.assertEqual(classify([(0, 0), (5, 1)], [(0, 1)]), "segment")
        self.assertEqual(classify([(-4, 4), (4, -4)], []), "segment")

    def test_two_distinct_points_after_dedupe(self):
        self.assertEqual(classify([(0, 0), (5, 1), (0, 0)], [(0, 1), (1, 2)]), "segment")

    def test_collinear_points_are_a_fragment(self):
        self.assertEqual(classify([(0, 0), (1, 1), (2, 2)], []), "fragment")
        self.assertEqual(classify([(0, 0), (1, 1), (2, 2), (3, 3)], loop(4)), "fragment")
        self.assertEqual(classify([(1, -3), (1, 0), (1, 4)], loop(3)), "fragment")


class PolygonTests(unittest.TestCase):
    def test_square(self):
        self.assertEqual(classify(SQUARE, loop(4)), "quadrilateral: square")

    def test_rectangle(self):
        self.assertEqual(classify(RECTANGLE, loop(4)), "quadrilateral: rectangle")

    def test_right_triangle(self):
        self.assertEqual(classify(RIGHT_TRIANGLE, loop(3)), "triangle: right")

    def test_triangle_without_edges(self):
        self.assertEqual(classify(RIGHT_TRIANGLE, []), "triangle: right")

    def test_pentagon_hexagon_ngon(self):
        self.assertEqual(classify(PENTAGON, loop(5)), "pentagon")
        self.assertEqual(classify(HEXAGON, loop(6)), "hexagon")
        self.assertEqual(classify(HEPTAGON, loop(7)), "7-gon")

    def test_inline_point_does_not_change_the_shape(self):
        self.assertEqual(classify(SQUARE_WITH_MIDPOINT, loop(5)), "quadrilateral: square")


class SelfIntersectionTests(unittest.TestCase):
    def test_bowtie(self):
        self.assertEqual(classify(BOWTIE, loop(4)), "self-intersecting: quadrilateral")

    def test_pentagram(self):
        self.assertEqual(classify(PENTAGRAM, loop(5)), "self-intersecting: pentagon")

    def test_edge_list_order_does_not_matter(self):
        reversed_loop = list(reversed(loop(4)))
        self.assertEqual(classify(BOWTIE, reversed_loop), "self-intersecting: quadrilateral")
        self.assertEqual(classify(SQUARE, reversed_loop), "quadrilateral: square")


class StructuredResultTests(unittest.TestCase):
    def test_figure_fields(self):
        figure = identify_figure(SQUARE, loop(4))
        self.assertEqual(figure.category, "quadrilateral")
        self.assertEqual(figure.subtype, "square")
        self.assertEqual(figure.vertex_count, 4)

    def test_self_intersecting_has_no_subtype(self):
        figure = identify_figure(BOWTIE, loop(4))
        self.assertEqual(figure.category, "self-intersecting")
        self.assertIsNone(figure.subtype)
        self.assertEqual(figure.vertex_count, 4)

    def test_accepts_model_objects(self):
        points = [Point(0, 0), ColoredPoint(Point(3, 0), "red"), (3, 2), Point(0, 2)]
        edges = [Edge(0, 1), (1, 2), Edge(2, 3), (3, 0)]
        self.assertEqual(classify(points, edges), "quadrilateral: rectangle")

    def test_pure_and_non_mutating(self):
        points = list(SQUARE_WITH_MIDPOINT)
        edges = loop(5)
        first = classify(points, edges)
        self.assertEqual(classify(points, edges), first)
        self.assertEqual(points, SQUARE_WITH_MIDPOINT)
        self.assertEqual(edges, loop(5))


class LanguageTests(unittest.TestCase):
    def test_russian_labels(self):
        self.assertEqual(classify([(1, 1)], [], language="ru"), "точка")
        self.assertEqual(classify(SQUARE, loop(4), language="ru"), "четырёхугольник: квадрат")
        self.assertEqual(classify(RIGHT_TRIANGLE, loop(3), language="ru"), "треугольник: прямоугольный")
        self.assertEqual(
            classify(BOWTIE, loop(4), language="ru"),
            "фигура с самопересечениями: четырёхугольник",
        )
        self.assertEqual(classify(HEPTAGON, loop(7), language="ru"), "7-угольник")

    def test_russian_general_quadrilateral(self):
        general = [(0, 0), (4, 0), (5, 3), (1, 2)]
        self.assertEqual(classify(general, loop(4), language="ru"), "четырёхугольник: четырёхугольник")

    def test_language_from_config(self):
        with mock.patch.object(config, "LANGUAGE", "ru"):
            self.assertEqual(classify([(0, 0), (1, 5)], []), "отрезок")

    def test_unknown_language_in_config(self):
        with mock.patch.object(config, "LANGUAGE", "xx"):
            with self.assertRaises(ValueError):
                classify([(0, 0)], [])


class EdgeResolutionTests(unittest.TestCase):
    """
    Edges index the point list as received; normalization can shrink
    that list. These tests pin what happens in each resolution mode.
    """

    def test_default_resolves_against_received_points(self):
        self.assertEqual(config.EDGE_RESOLUTION, "original")
        self.assertEqual(classify(SQUARE_WITH_MIDPOINT, loop(5)), "quadrilateral: square")

    def test_normalized_mode_raises_when_list_shrinks(self):
        with self.assertRaises(IndexError):
            identify_figure(SQUARE_WITH_MIDPOINT, loop(5), edge_resolution="normalized")

    def test_normalized_mode_from_config(self):
        with mock.patch.object(config, "EDGE_RESOLUTION", "normalized"):
            with self.assertRaises(IndexError):
                classify(SQUARE_WITH_MIDPOINT, loop(5))
            self.assertEqual(classify(SQUARE, loop(4)), "quadrilateral: square")

    def test_normalized_mode_without_shrinking(self):
        figure = identify_figure(BOWTIE, loop(4), edge_resolution="normalized")
        self.assertEqual(figure.category, "self-intersecting")

    def test_non_consecutive_duplicate_checks_the_normalized_loop(self):
        # normalizes to the bowtie (0, 0), (2, 2), (2, 0), (0, 2)
        points = [(0, 0), (2, 2), (2, 0), (0, 0), (0, 2)]
        self.assertEqual(classify(points, loop(5)), "self-intersecting: quadrilateral")

    def test_collinear_spike_checks_the_normalized_loop(self):
        # the spike to (-2, 4) is stripped, leaving a plain square
        points = [(0, 0), (4, 0), (4, 4), (-2, 4), (0, 4)]
        self.assertEqual(classify(points, loop(5)), "quadrilateral: square")

    def test_crossing_check_and_subtype_see_the_same_polygon(self):
        for points in (
            [(0, 0), (2, 2), (2, 0), (0, 0), (0, 2)],
            [(0, 0), (4, 0), (4, 4), (-2, 4), (0, 4)],
            SQUARE_WITH_MIDPOINT,
        ):
            normalized = normalize_points([Point(x, y) for x, y in points])
            self.assertEqual(
                classify(points, loop(len(points))),
                classify(normalized, loop(len(normalized))),
            )

    def test_edge_outside_received_points(self):
        with self.assertRaises(IndexError):
            classify(SQUARE, [(0, 1), (1, 2), (2, 3), (3, 4)])

    def test_unknown_mode(self):
        with self.assertRaises(ValueError):
            identify_figure(SQUARE, loop(4), edge_resolution="closest")


if __name__ == "__main__":
    unittest.main()
