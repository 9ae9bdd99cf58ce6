"""
Grouping by orientation and length, without merging.
"""

from typing import List

from loguru import logger

from line_consolidation.models.segment import AnnotatedSegment
from line_consolidation.utils.clustering import first_fit_bins
from line_consolidation.utils.geometry import scalar_within_tolerance


def is_similar(candidate: AnnotatedSegment, member: AnnotatedSegment, rtol: float, dtolp: float) -> bool:
    """
    |angle difference| < rtol and the lengths agree within the proportional
    tolerance dtolp.
    """
    if abs(candidate.angle - member.angle) >= rtol:
        return False
    return scalar_within_tolerance(candidate.length, member.length, dtolp)


def group_by_slope_and_length(
    segments: List[AnnotatedSegment], rtol: float, dtolp: float
) -> List[List[AnnotatedSegment]]:
    groups = first_fit_bins(list(segments), lambda cand, member: is_similar(cand, member, rtol, dtolp))
    logger.debug("Slope/length: {} segments -> {} groups", len(segments), len(groups))
    return groups
