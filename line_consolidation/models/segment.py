from dataclasses import dataclass
from typing import Optional, Tuple

# (x0, y0, x1, y1)
RawSegment = Tuple[float, float, float, float]


@dataclass(frozen=True)
class AnnotatedSegment:
    """
    A raw segment together with the values the groupers compare:

      - angle (radians): asin branch for mostly-horizontal segments,
        acos branch otherwise (see consolidation.annotator)
      - length
      - x_intercept / y_intercept, present only inside their angle windows
      - rank: position of the segment in the original input sequence

    Instances are immutable, so rank can be shared freely between groups
    and clusters without being recomputed.
    """

    angle: float
    length: float
    coordinates: RawSegment
    x_intercept: Optional[float] = None
    y_intercept: Optional[float] = None
    rank: int = 0

    # ------------------------------------------------------------
    # Endpoint access
    # ------------------------------------------------------------
    @property
    def a1(self) -> Tuple[float, float]:
        return self.coordinates[0], self.coordinates[1]

    @property
    def a2(self) -> Tuple[float, float]:
        return self.coordinates[2], self.coordinates[3]

    @property
    def endpoints(self):
        return self.a1, self.a2

    def is_negatively_signed(self) -> bool:
        """
        True when x and y change in opposite directions along the segment,
        i.e. it runs along the anti-diagonal of its bounding box.
        """
        x0, y0, x1, y1 = self.coordinates
        dx = x1 - x0
        dy = y1 - y0
        return (dx < 0 < dy) or (dy < 0 < dx)

    def __repr__(self):
        return (
            f"AnnotatedSegment(rank={self.rank}, coords={tuple(self.coordinates)}, "
            f"angle={self.angle:.4f}, length={self.length:.2f})"
        )


@dataclass(frozen=True)
class ConsolidatedSegment:
    """
    One synthesized segment per adjacency cluster.

    aggregate_rank is the ordering weight; min_rank (the lowest original
    rank among the members) breaks ties.
    """

    coordinates: RawSegment
    aggregate_rank: int
    min_rank: int = 0
    member_count: int = 1

