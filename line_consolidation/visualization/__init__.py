"""
Visualization Tools

Provides drawing utilities for:
- Raw and consolidated segments
- Slope/length groups
"""

from .draw_lines import draw_segments, draw_groups
from .save_outputs import (
    save_all_outputs,
    save_raw_segments,
    save_consolidated,
    save_groups,
)

__all__ = [
    "draw_segments",
    "draw_groups",
    "save_all_outputs",
    "save_raw_segments",
    "save_consolidated",
    "save_groups",
]
