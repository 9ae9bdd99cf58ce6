"""
Line Consolidation Package

Turns fragmented line-segment detections into a small set of long,
representative segments, and groups segments by orientation and length:

- Segment annotation (angle, length, intercepts, rank)
- Collinearity grouping & adjacency merging
- Line synthesis & rank ordering
- Slope/length grouping
- OpenCV segment detection and output visualization
"""

from .errors import ConsolidationError, InvalidSegment, ConfigurationError
from .consolidation.pipeline import (
    consolidate_lines,
    consolidate_annotated,
    group_lines_by_slope,
    group_annotated_by_slope,
)

__all__ = [
    "config",
    "main",
    "consolidation",
    "detectors",
    "models",
    "utils",
    "visualization",
    "ConsolidationError",
    "InvalidSegment",
    "ConfigurationError",
    "consolidate_lines",
    "consolidate_annotated",
    "group_lines_by_slope",
    "group_annotated_by_slope",
]
