"""
Line synthesis: one bounding segment per adjacency cluster.
"""

import math
from typing import List, Optional

import numpy as np

from line_consolidation.models.segment import AnnotatedSegment, ConsolidatedSegment

PI = math.pi


def rising_diagonal(angle: float) -> bool:
    """
    Whether an angle selects the (x_min, y_min) -> (x_max, y_max) diagonal.
    """
    return (0 < angle < PI / 2) or (PI < angle < PI * 3 / 2) or (-PI < angle < -PI / 2)


def aggregate_rank(cluster: List[AnnotatedSegment], total: int) -> int:
    """
    Sum of (total - rank) over the members: clusters holding early input
    segments weigh more.
    """
    return sum(total - segment.rank for segment in cluster)


def synthesize_line(cluster: List[AnnotatedSegment], total: int) -> Optional[ConsolidatedSegment]:
    """
    Reduces a cluster to the diagonal of its bounding box.

    The diagonal is picked from the angle of the last-processed member
    (the last one in the cluster). Returns None for an empty cluster or a
    box without extent.
    """
    if not cluster:
        return None

    coords = np.asarray([s.coordinates for s in cluster], dtype=float).reshape(-1, 2)
    x_min, y_min = (float(v) for v in coords.min(axis=0))
    x_max, y_max = (float(v) for v in coords.max(axis=0))

    if not (x_min < x_max or y_min < y_max):
        return None

    if rising_diagonal(cluster[-1].angle):
        line = (x_min, y_min, x_max, y_max)
    else:
        line = (x_min, y_max, x_max, y_min)

    return ConsolidatedSegment(
        coordinates=line,
        aggregate_rank=aggregate_rank(cluster, total),
        min_rank=min(s.rank for s in cluster),
        member_count=len(cluster),
    )
