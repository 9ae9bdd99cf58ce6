"""
Deterministic ordering of consolidated segments.
"""

from typing import Iterable, List

from line_consolidation.models.segment import ConsolidatedSegment, RawSegment


def rank_key(segment: ConsolidatedSegment):
    # descending aggregate rank, then ascending lowest member rank
    return (-segment.aggregate_rank, segment.min_rank)


def sort_by_rank(segments: Iterable[ConsolidatedSegment]) -> List[ConsolidatedSegment]:
    return sorted(segments, key=rank_key)


def order_by_rank(segments: Iterable[ConsolidatedSegment]) -> List[RawSegment]:
    """
    Stable sort by rank_key, returning only the coordinates.
    """
    return [s.coordinates for s in sort_by_rank(segments)]
