"""
Segment annotation.

This module provides:
    • annotate_segment(segment, rank)
    • annotate_segments(segments, on_invalid, start_rank)

Angles come from two branches that do not share one circular range:

    |dx| >  |dy|  ->  asin(dy / length)   in [-pi/2, pi/2]
    |dx| <= |dy|  ->  acos(dx / length)   in [0, pi]

The intercept windows below are written against those two ranges.
"""

import math
from typing import Iterable, List, Sequence

import numpy as np
from loguru import logger

from line_consolidation.config import validate_policy
from line_consolidation.errors import InvalidSegment
from line_consolidation.models.segment import AnnotatedSegment

PI = math.pi

# "mostly vertical": the x-intercept is well conditioned
X_INTERCEPT_WINDOW = (PI / 8, PI * 7 / 8)

# "mostly horizontal": centred on 0 for the asin branch, or past 5pi/8 for
# the acos branch (which tops out at pi)
Y_INTERCEPT_WINDOWS = ((-PI * 3 / 8, PI * 3 / 8), (PI * 5 / 8, PI))


def _in_window(angle, window, closed_upper=False):
    lo, hi = window
    if closed_upper:
        return lo < angle <= hi
    return lo < angle < hi


def _as_coordinates(segment, rank):
    try:
        coords = np.asarray(segment, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise InvalidSegment(f"Segment {rank} is not numeric: {segment!r}", rank, segment) from e

    if coords.size != 4:
        raise InvalidSegment(
            f"Segment {rank} needs 4 coordinates, got {coords.size}", rank, segment
        )
    if not np.all(np.isfinite(coords)):
        raise InvalidSegment(f"Segment {rank} has non-finite coordinates", rank, segment)

    return tuple(float(c) for c in coords)


def annotate_segment(segment: Sequence[float], rank: int = 0) -> AnnotatedSegment:
    """
    Computes angle, length and axis intercepts of one raw segment.

    Raises InvalidSegment for zero-length or non-finite input.
    """
    x0, y0, x1, y1 = coords = _as_coordinates(segment, rank)
    dx = x1 - x0
    dy = y1 - y0
    length = math.hypot(dx, dy)

    if length == 0:
        raise InvalidSegment(f"Segment {rank} has zero length", rank, segment)

    # ratios are clamped against rounding just outside [-1, 1]
    if abs(dx) > abs(dy):
        angle = math.asin(max(-1.0, min(1.0, dy / length)))
    else:
        angle = math.acos(max(-1.0, min(1.0, dx / length)))

    x_intercept = None
    if _in_window(angle, X_INTERCEPT_WINDOW):
        x_intercept = x0 - y0 * (dx / dy)

    y_intercept = None
    if _in_window(angle, Y_INTERCEPT_WINDOWS[0]) or _in_window(
        angle, Y_INTERCEPT_WINDOWS[1], closed_upper=True
    ):
        y_intercept = y0 - x0 * (dy / dx)

    return AnnotatedSegment(
        angle=angle,
        length=length,
        coordinates=coords,
        x_intercept=x_intercept,
        y_intercept=y_intercept,
        rank=rank,
    )


def annotate_segments(
    segments: Iterable[Sequence[float]],
    on_invalid: str = "skip",
    start_rank: int = 0,
) -> List[AnnotatedSegment]:
    """
    Annotates a sequence of raw segments, one output per valid input.

    rank = start_rank + position in `segments`. A skipped segment still
    consumes its position, so ranks always point back into the input.

    on_invalid:
        "skip"  - log a warning and continue with the remaining segments
        "raise" - propagate the first InvalidSegment
    """
    validate_policy(on_invalid)

    annotated = []
    skipped = 0

    for offset, segment in enumerate(segments):
        rank = start_rank + offset
        try:
            annotated.append(annotate_segment(segment, rank))
        except InvalidSegment as e:
            if on_invalid == "raise":
                raise
            skipped += 1
            logger.warning("Skipping segment {}: {}", rank, e)

    if skipped:
        logger.debug("Annotated {} segments, skipped {}", len(annotated), skipped)

    return annotated
