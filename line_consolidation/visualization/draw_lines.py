"""
Visualization utilities for rendering line segments.

This module provides:
    • draw_segments(img, segments, color, thickness)
    • draw_groups(img, groups, thickness)
"""

from typing import List, Sequence, Tuple

import cv2

from line_consolidation.config import GROUP_PALETTE
from line_consolidation.models.segment import AnnotatedSegment


def _point(x, y):
    return (int(round(x)), int(round(y)))


def _coords(segment):
    # raw tuples, AnnotatedSegment and ConsolidatedSegment all carry 4 coords
    return getattr(segment, "coordinates", segment)


# ---------------------------------------------------------------------
#  BASIC: Draw a list of segments in a single color
# ---------------------------------------------------------------------

def draw_segments(
    image,
    segments: Sequence,
    color: Tuple[int, int, int] = (0, 255, 0),
    thickness: int = 2
):
    """
    Draws segments onto an image (modified in-place).

    Args:
        image: BGR numpy array
        segments: raw (x0, y0, x1, y1) tuples or objects with .coordinates
        color: (B, G, R)
        thickness: pixel width
    """
    for seg in segments:
        x0, y0, x1, y1 = _coords(seg)
        cv2.line(image, _point(x0, y0), _point(x1, y1), color, thickness)
    return image


# ---------------------------------------------------------------------
#  GROUPS: one palette color per slope/length group
# ---------------------------------------------------------------------

def draw_groups(
    image,
    groups: List[List[AnnotatedSegment]],
    thickness: int = 2
):
    """
    Draws each group in its own color, cycling through GROUP_PALETTE.
    """
    for idx, group in enumerate(groups):
        color = GROUP_PALETTE[idx % len(GROUP_PALETTE)]
        draw_segments(image, group, color=color, thickness=thickness)
    return image
