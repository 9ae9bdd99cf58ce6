"""
Detectors Package

Segment producers feeding the consolidation pipeline:
- Hough / LSD line-segment detection
- Dominant-line lookup
"""

from .line_detector import detect_segments, find_dominant_line

__all__ = [
    "detect_segments",
    "find_dominant_line",
]
