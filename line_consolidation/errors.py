"""
Error types raised by the consolidation pipeline.

    • ConsolidationError   - common base
    • InvalidSegment       - a segment whose angle cannot be computed
    • ConfigurationError   - bad tolerances / policies, raised before any work
"""


class ConsolidationError(Exception):
    pass


class InvalidSegment(ConsolidationError, ValueError):
    """
    Raised for zero-length segments, segments without exactly four
    coordinates, and segments with non-finite coordinates.
    """

    def __init__(self, message, index=None, coordinates=None):
        super().__init__(message)
        self.index = index
        self.coordinates = coordinates


class ConfigurationError(ConsolidationError, ValueError):
    pass
