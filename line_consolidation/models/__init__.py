"""
Data Models

Defines the core data structures:
- RawSegment (type alias)
- AnnotatedSegment
- ConsolidatedSegment
"""

from .segment import RawSegment, AnnotatedSegment, ConsolidatedSegment

__all__ = ["RawSegment", "AnnotatedSegment", "ConsolidatedSegment"]
