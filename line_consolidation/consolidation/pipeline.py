"""
Entry points of the consolidation system.

This module provides:
    • consolidate_lines(segments, rtol, dtol, dtolp)
    • consolidate_annotated(annotated, rtol, dtol, dtolp, total)
    • group_lines_by_slope(segments, rtol, dtolp)
    • group_annotated_by_slope(annotated, rtol, dtolp)
    • consolidate_with_params(segments, params, width)

Consolidation:
    raw -> annotate -> collinearity groups -> adjacency clusters
        -> one synthesized line per cluster -> ordered by aggregate rank

Grouping:
    raw -> annotate -> slope/length groups
"""

from typing import List, Optional, Sequence

from loguru import logger

from line_consolidation.config import (
    distance_tolerance_for_width,
    get_active_params,
    validate_params,
    validate_tolerances,
)
from line_consolidation.consolidation.adjacency import merge_adjacent
from line_consolidation.consolidation.annotator import annotate_segments
from line_consolidation.consolidation.collinearity import group_collinear
from line_consolidation.consolidation.ordering import order_by_rank, sort_by_rank
from line_consolidation.consolidation.slope_length import group_by_slope_and_length
from line_consolidation.consolidation.synthesis import synthesize_line
from line_consolidation.models.segment import AnnotatedSegment, ConsolidatedSegment, RawSegment


# ========================================================================
# 1. CONSOLIDATION
# ========================================================================

def consolidate_annotated_ranked(
    annotated: Sequence[AnnotatedSegment],
    rtol: float,
    dtol: float,
    dtolp: float,
    total: Optional[int] = None,
) -> List[ConsolidatedSegment]:
    """
    Same as consolidate_annotated(), but keeps the rank data on the output
    (sorted, rank_key order).

    total is the original segment count used by the aggregate rank; it
    defaults to one past the highest rank present.
    """
    # dtolp only matters for the grouping path; it is still checked so both
    # entry points accept the same tolerances
    validate_tolerances(rtol=rtol, dtol=dtol, dtolp=dtolp)

    annotated = list(annotated)
    if not annotated:
        return []

    if total is None:
        total = max(s.rank for s in annotated) + 1

    clusters = []
    for group in group_collinear(annotated, rtol, dtol):
        clusters.extend(merge_adjacent(group, dtol))

    lines = []
    for cluster in clusters:
        line = synthesize_line(cluster, total)
        if line is not None:
            lines.append(line)

    logger.debug(
        "Consolidated {} segments into {} lines ({} clusters)",
        len(annotated), len(lines), len(clusters),
    )
    return sort_by_rank(lines)


def consolidate_annotated(
    annotated: Sequence[AnnotatedSegment],
    rtol: float,
    dtol: float,
    dtolp: float,
    total: Optional[int] = None,
) -> List[RawSegment]:
    """
    Consolidates already annotated segments into longer segments.
    """
    ranked = consolidate_annotated_ranked(annotated, rtol, dtol, dtolp, total)
    return order_by_rank(ranked)


def consolidate_lines(
    segments: Sequence[Sequence[float]],
    rtol: float,
    dtol: float,
    dtolp: float,
    on_invalid: str = "skip",
) -> List[RawSegment]:
    """
    Consolidates nearby, nearly coincident raw segments into larger ones.

    Args:
        segments: (x0, y0, x1, y1) sequences, in detection order
        rtol: angular tolerance, radians
        dtol: absolute distance tolerance
        dtolp: proportional distance tolerance (checked, not used for merging)
        on_invalid: "skip" or "raise" for degenerate segments

    Returns:
        Consolidated segments, those built from earlier inputs first.
    """
    validate_tolerances(rtol=rtol, dtol=dtol, dtolp=dtolp)

    segments = list(segments)
    annotated = annotate_segments(segments, on_invalid=on_invalid)
    return consolidate_annotated(annotated, rtol, dtol, dtolp, total=len(segments))


# ========================================================================
# 2. SLOPE / LENGTH GROUPING
# ========================================================================

def group_annotated_by_slope(
    annotated: Sequence[AnnotatedSegment], rtol: float, dtolp: float
) -> List[List[AnnotatedSegment]]:
    validate_tolerances(rtol=rtol, dtolp=dtolp)

    annotated = list(annotated)
    if not annotated:
        return []
    return group_by_slope_and_length(annotated, rtol, dtolp)


def group_lines_by_slope(
    segments: Sequence[Sequence[float]],
    rtol: float,
    dtolp: float,
    on_invalid: str = "skip",
) -> List[List[AnnotatedSegment]]:
    """
    Groups raw segments sharing orientation and length; nothing is merged.
    """
    validate_tolerances(rtol=rtol, dtolp=dtolp)

    annotated = annotate_segments(segments, on_invalid=on_invalid)
    return group_annotated_by_slope(annotated, rtol, dtolp)


# ========================================================================
# 3. CONFIG-DRIVEN WRAPPER
# ========================================================================

def consolidate_with_params(segments, params=None, width=None) -> List[RawSegment]:
    """
    consolidate_lines() with tolerances taken from config.get_active_params().

    When `width` (image width) is given, the absolute tolerance scales with it.
    """
    if params is None:
        params = get_active_params()
    validate_params(params)

    return consolidate_lines(
        segments,
        rtol=params["ANGLE_TOLERANCE"],
        dtol=distance_tolerance_for_width(width, params),
        dtolp=params["LENGTH_TOLERANCE"],
        on_invalid=params["ON_INVALID"],
    )
