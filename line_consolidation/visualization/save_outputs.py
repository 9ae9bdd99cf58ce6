"""
Centralized output-saving utilities for the command-line driver.

This module provides:
    • save_all_outputs(...)
    • save_raw_segments(...)
    • save_consolidated(...)
    • save_groups(...)
"""

from typing import List, Sequence

import numpy as np

from line_consolidation.config import COLOR_CONSOLIDATED, COLOR_RAW, COLOR_TOP
from line_consolidation.models.segment import AnnotatedSegment
from line_consolidation.utils.image_io import ensure_output_dir, save_image
from line_consolidation.visualization.draw_lines import draw_groups, draw_segments


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_raw_segments(path: str, base_image: np.ndarray, segments: Sequence):
    vis = base_image.copy()
    draw_segments(vis, segments, color=COLOR_RAW, thickness=1)
    return save_image(path, vis)


def save_consolidated(path: str, base_image: np.ndarray, lines: Sequence):
    """
    Consolidated lines in red, the highest-ranked one in green on top.
    """
    vis = base_image.copy()
    draw_segments(vis, lines, color=COLOR_CONSOLIDATED)
    if lines:
        draw_segments(vis, lines[:1], color=COLOR_TOP, thickness=3)
    return save_image(path, vis)


def save_groups(path: str, base_image: np.ndarray, groups: List[List[AnnotatedSegment]]):
    vis = base_image.copy()
    draw_groups(vis, groups)
    return save_image(path, vis)


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    image_id: str,
    base_image: np.ndarray,
    raw_segments: Sequence,
    lines: Sequence,
    groups: List[List[AnnotatedSegment]],
):
    """
    Saves every output artifact for one processed image:

        <id>_raw.png
        <id>_consolidated.png
        <id>_groups.png
    """
    ensure_output_dir(output_dir)

    if base_image.ndim == 2:
        base_image = np.dstack([base_image] * 3)

    save_raw_segments(f"{output_dir}/{image_id}_raw.png", base_image, raw_segments)
    save_consolidated(f"{output_dir}/{image_id}_consolidated.png", base_image, lines)
    save_groups(f"{output_dir}/{image_id}_groups.png", base_image, groups)
