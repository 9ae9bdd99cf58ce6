"""
This module provides:
    - point_distance
    - project_point_on_line
    - point_in_span
    - projected_point_within_tolerance
    - scalar_within_tolerance
    - segment_to_rectangle
    - segments_bounding_line

Segments and lines are flat 4-sequences (x0, y0, x1, y1) throughout.
"""

import math
from typing import Iterable, Sequence, Tuple

import numpy as np

# Slack for floating point error when a projected point sits on a span edge
SPAN_EPSILON = 1e-9


# ----------------------------------------------------------------------
#  POINTS
# ----------------------------------------------------------------------

def point_distance(p0: Sequence[float], p1: Sequence[float]) -> float:
    return math.dist((p0[0], p0[1]), (p1[0], p1[1]))


def project_point_on_line(line: Sequence[float], point: Sequence[float]) -> Tuple[float, float]:
    """
    Projection of `point` onto the infinite line through the endpoints of
    `line`. The result is not necessarily on the segment itself.
    """
    x1, y1, x2, y2 = line
    x3, y3 = point[0], point[1]
    dx, dy = (x2 - x1), (y2 - y1)
    det = dx * dx + dy * dy

    if det == 0:  # degenerate line
        return (x1, y1)

    a = (dy * (y3 - y1) + dx * (x3 - x1)) / det
    return (x1 + a * dx, y1 + a * dy)


def point_in_span(line: Sequence[float], point: Sequence[float], eps: float = SPAN_EPSILON) -> bool:
    """
    Bounding-box containment: the point lies between the line endpoints in
    both x and y (inclusive).
    """
    x0, y0 = point[0], point[1]
    if not (min(line[0], line[2]) - eps <= x0 <= max(line[0], line[2]) + eps):
        return False
    if not (min(line[1], line[3]) - eps <= y0 <= max(line[1], line[3]) + eps):
        return False
    return True


def projected_point_within_tolerance(line: Sequence[float], point: Sequence[float], tol: float) -> bool:
    """
    True when the point lies inside a stripe of half-width `tol` along the
    segment: its perpendicular projection falls on the segment span and the
    point is no further than `tol` from that projection.
    """
    projected = project_point_on_line(line, point)
    if not point_in_span(line, projected):
        return False
    return point_distance(point, projected) <= tol


def scalar_within_tolerance(a: float, b: float, t: float) -> bool:
    """
    Proportional closeness: |a - b| < t * max(|a|, |b|).
    """
    return abs(b - a) < max(abs(a), abs(b)) * t


# ----------------------------------------------------------------------
#  RECTANGLES
# ----------------------------------------------------------------------

def segment_to_rectangle(segment: Sequence[float]) -> Tuple[float, float, float, float]:
    """
    [x, y, w, h] box spanned by a segment, independent of which end comes
    first.
    """
    min_x = min(segment[0], segment[2])
    max_x = max(segment[0], segment[2])
    min_y = min(segment[1], segment[3])
    max_y = max(segment[1], segment[3])
    return (min_x, min_y, max_x - min_x, max_y - min_y)


# ----------------------------------------------------------------------
#  BOUNDING LINE OF A GROUP
# ----------------------------------------------------------------------

def segments_bounding_line(segments: Iterable, signed: bool = True) -> Tuple[float, float, float, float]:
    """
    Bounding box of annotated segments converted into a line.

    With signed=True the diagonal follows the prevailing orientation of the
    inputs: when more segments run against the main diagonal than along it,
    the anti-diagonal (x_min, y_max) -> (x_max, y_min) is returned.
    """
    segments = list(segments)
    if not segments:
        raise ValueError("segments_bounding_line needs at least one segment")

    coords = np.asarray([s.coordinates for s in segments], dtype=float).reshape(-1, 2)
    x_min, y_min = coords.min(axis=0)
    x_max, y_max = coords.max(axis=0)

    signedness = sum(-1 if s.is_negatively_signed() else 1 for s in segments)

    if signed and signedness < 0:
        return (float(x_min), float(y_max), float(x_max), float(y_min))
    return (float(x_min), float(y_min), float(x_max), float(y_max))
