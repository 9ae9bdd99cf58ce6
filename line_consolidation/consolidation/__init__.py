"""
Consolidation Package

Contains the stages of the segment consolidation pipeline:
- Segment annotation
- Collinearity grouping
- Adjacency merging
- Line synthesis
- Rank ordering
- Slope/length grouping
"""

from .annotator import annotate_segment, annotate_segments
from .collinearity import group_collinear
from .adjacency import merge_adjacent
from .synthesis import synthesize_line
from .ordering import order_by_rank
from .slope_length import group_by_slope_and_length
from .pipeline import (
    consolidate_lines,
    consolidate_annotated,
    consolidate_annotated_ranked,
    group_lines_by_slope,
    group_annotated_by_slope,
    consolidate_with_params,
)

__all__ = [
    "annotate_segment",
    "annotate_segments",
    "group_collinear",
    "merge_adjacent",
    "synthesize_line",
    "order_by_rank",
    "group_by_slope_and_length",
    "consolidate_lines",
    "consolidate_annotated",
    "consolidate_annotated_ranked",
    "group_lines_by_slope",
    "group_annotated_by_slope",
    "consolidate_with_params",
]
