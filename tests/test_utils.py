from __future__ import annotations

import unittest

from line_consolidation.consolidation.annotator import annotate_segments
from line_consolidation.utils.clustering import DisjointSet, combine_bins, first_fit_bins
from line_consolidation.utils.geometry import (
    point_in_span,
    project_point_on_line,
    projected_point_within_tolerance,
    scalar_within_tolerance,
    segment_to_rectangle,
    segments_bounding_line,
)


class TestGeometry(unittest.TestCase):
    def test_projection(self) -> None:
        self.assertEqual(project_point_on_line((0, 0, 10, 0), (4, 7)), (4.0, 0.0))
        px, py = project_point_on_line((0, 0, 10, 10), (0, 10))
        self.assertAlmostEqual(px, 5.0)
        self.assertAlmostEqual(py, 5.0)
        # degenerate line projects onto its only point
        self.assertEqual(project_point_on_line((3, 3, 3, 3), (9, 9)), (3, 3))

    def test_point_in_span(self) -> None:
        self.assertTrue(point_in_span((0, 0, 10, 5), (10, 5)))
        self.assertTrue(point_in_span((10, 5, 0, 0), (3, 2)))
        self.assertFalse(point_in_span((0, 0, 10, 5), (11, 2)))

    def test_projected_point_within_tolerance(self) -> None:
        self.assertTrue(projected_point_within_tolerance((0, 0, 10, 0), (5, 2), 2))
        self.assertFalse(projected_point_within_tolerance((0, 0, 10, 0), (5, 2.5), 2))
        self.assertFalse(projected_point_within_tolerance((0, 0, 10, 0), (11, 0), 2))

    def test_scalar_within_tolerance(self) -> None:
        self.assertFalse(scalar_within_tolerance(10, 15, 0.1))
        self.assertTrue(scalar_within_tolerance(10, 15, 0.4))
        self.assertFalse(scalar_within_tolerance(0, 0, 0.5))

    def test_segment_to_rectangle(self) -> None:
        self.assertEqual(segment_to_rectangle((10, 8, 2, 3)), (2, 3, 8, 5))

    def test_bounding_line_follows_majority_orientation(self) -> None:
        rising = annotate_segments([(0, 0, 10, 10), (12, 12, 20, 20)])
        self.assertEqual(segments_bounding_line(rising), (0.0, 0.0, 20.0, 20.0))

        falling = annotate_segments([(0, 20, 10, 10), (12, 8, 20, 0)])
        self.assertEqual(segments_bounding_line(falling), (0.0, 20.0, 20.0, 0.0))
        self.assertEqual(segments_bounding_line(falling, signed=False), (0.0, 0.0, 20.0, 20.0))

    def test_bounding_line_needs_segments(self) -> None:
        with self.assertRaises(ValueError):
            segments_bounding_line([])


class TestClustering(unittest.TestCase):
    def test_first_fit_is_order_dependent(self) -> None:
        close = lambda a, b: abs(a - b) <= 1
        self.assertEqual(first_fit_bins([0, 2, 1], close), [[0, 1], [2]])
        self.assertEqual(first_fit_bins([1, 0, 2], close), [[1, 0, 2]])
        self.assertEqual(first_fit_bins([], close), [])

    def test_disjoint_set(self) -> None:
        sets = DisjointSet(5)
        sets.union(3, 4)
        sets.union(4, 1)
        self.assertEqual(sets.find(3), 1)
        self.assertEqual(sets.find(4), 1)
        self.assertEqual(sets.find(0), 0)
        self.assertEqual(sets.add(), 5)
        self.assertEqual(len(sets), 6)

    def test_path_compression(self) -> None:
        sets = DisjointSet(4)
        sets.parent = [0, 0, 1, 2]
        self.assertEqual(sets.find(3), 0)
        self.assertEqual(sets.parent, [0, 0, 0, 0])

    def test_combine_bins(self) -> None:
        sets = DisjointSet(4)
        sets.union(0, 2)
        sets.union(3, 2)
        combined = combine_bins([["a"], ["b"], ["c"], ["d", "e"]], sets)
        self.assertEqual(combined, [["a", "c", "d", "e"], ["b"]])

    def test_combine_bins_drops_empty(self) -> None:
        sets = DisjointSet(2)
        self.assertEqual(combine_bins([[], ["x"]], sets), [["x"]])


if __name__ == "__main__":
    unittest.main()
