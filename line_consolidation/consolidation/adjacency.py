"""
Adjacency merging inside one collinearity group.

This module provides:
    • is_adjacent(cluster, candidate, dtol)
    • merge_adjacent(group, dtol)

Clusters are built incrementally. A segment that touches several clusters
joins the first one and links all of them; links are resolved afterwards
with a union-find, so chains A-B-C collapse into one cluster.
"""

from typing import List

from loguru import logger

from line_consolidation.models.segment import AnnotatedSegment
from line_consolidation.utils.clustering import DisjointSet, combine_bins
from line_consolidation.utils.geometry import (
    point_distance,
    projected_point_within_tolerance,
    segments_bounding_line,
)


def is_adjacent(cluster: List[AnnotatedSegment], candidate: AnnotatedSegment, dtol: float) -> bool:
    """
    True when either endpoint of `candidate` is within dtol of the line
    approximating `cluster`:

      (a) perpendicularly, with the projection inside the line's span, or
      (b) directly, measured to either end of the line.

    Assumes collinearity; only proximity is tested here.
    """
    bounds = segments_bounding_line(cluster, signed=True)
    ends = (bounds[0], bounds[1]), (bounds[2], bounds[3])

    for point in candidate.endpoints:
        if projected_point_within_tolerance(bounds, point, dtol):
            return True

    for point in candidate.endpoints:
        for end in ends:
            if point_distance(end, point) <= dtol:
                return True

    return False


def merge_adjacent(group: List[AnnotatedSegment], dtol: float) -> List[List[AnnotatedSegment]]:
    """
    Splits one collinearity group into adjacency clusters.

    Every member of `group` ends up in exactly one returned cluster, and
    members keep the order in which they were processed, so a merged
    cluster still ends with its last-processed segment.
    """
    # clusters hold positions in `group`
    clusters: List[List[int]] = []
    links = DisjointSet()

    for pos, segment in enumerate(group):
        matched = [
            idx for idx, members in enumerate(clusters)
            if is_adjacent([group[i] for i in members], segment, dtol)
        ]

        if not matched:
            clusters.append([pos])
            links.add()
            continue

        first = matched[0]
        clusters[first].append(pos)
        for other in matched[1:]:
            links.union(first, other)

    merged = combine_bins(clusters, links)
    if len(merged) != len(clusters):
        logger.debug("Adjacency: {} clusters merged into {}", len(clusters), len(merged))

    return [[group[i] for i in sorted(members)] for members in merged]
