"""
Collinearity grouping.

Two annotated segments are collinear when their angles differ by less than
rtol AND they share an axis intercept within dtol (both y-intercepts, or
both x-intercepts). Groups are formed by first-fit binning.
"""

from typing import List

from loguru import logger

from line_consolidation.models.segment import AnnotatedSegment
from line_consolidation.utils.clustering import first_fit_bins


def _intercepts_match(a, b, dtol):
    if a is None or b is None:
        return False
    return abs(a - b) <= dtol


def is_collinear(candidate: AnnotatedSegment, member: AnnotatedSegment, rtol: float, dtol: float) -> bool:
    if abs(candidate.angle - member.angle) >= rtol:
        return False
    return _intercepts_match(candidate.y_intercept, member.y_intercept, dtol) or _intercepts_match(
        candidate.x_intercept, member.x_intercept, dtol
    )


def group_collinear(segments: List[AnnotatedSegment], rtol: float, dtol: float) -> List[List[AnnotatedSegment]]:
    """
    Bins segments into collinearity groups.

    Every segment ends up in exactly one group; group and member order
    follow the input order.
    """
    groups = first_fit_bins(list(segments), lambda cand, member: is_collinear(cand, member, rtol, dtol))
    logger.debug("Collinearity: {} segments -> {} groups", len(segments), len(groups))
    return groups
