"""
Utility Functions

Provides geometry operations, first-fit / union-find clustering,
logging setup and image I/O used across the pipeline.
"""

from .geometry import (
    point_distance,
    project_point_on_line,
    point_in_span,
    projected_point_within_tolerance,
    scalar_within_tolerance,
    segment_to_rectangle,
    segments_bounding_line,
)
from .clustering import first_fit_bins, DisjointSet, combine_bins
from .logging import setup_logging

__all__ = [
    "point_distance",
    "project_point_on_line",
    "point_in_span",
    "projected_point_within_tolerance",
    "scalar_within_tolerance",
    "segment_to_rectangle",
    "segments_bounding_line",
    "first_fit_bins",
    "DisjointSet",
    "combine_bins",
    "setup_logging",
]
