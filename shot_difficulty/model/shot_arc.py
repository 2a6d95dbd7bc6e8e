"""ShotArc - One candidate trajectory as a three-leg polyline.

tee -> p1 -> p2 -> target, where p1 and p2 are the ascending and descending
waypoints of an idealized arc. The tee and target stored here are already
lifted off the ground.
"""

from dataclasses import dataclass, replace

from shot_difficulty.model.point3 import Point3


@dataclass(frozen=True)
class ShotArc:
    """Candidate flight path.

    Attributes:
        tee: Start point (lifted)
        p1: Ascending waypoint, at P1_RELATIVE of the landing length
        p2: Descending waypoint, at P2_RELATIVE of the landing length
        target: End point (lifted)
    """

    tee: Point3
    p1: Point3
    p2: Point3
    target: Point3

    def segments(self) -> tuple[tuple[Point3, Point3], tuple[Point3, Point3], tuple[Point3, Point3]]:
        """The three legs in flight order."""
        return (self.tee, self.p1), (self.p1, self.p2), (self.p2, self.target)

    def shifted(self, offset: Point3) -> "ShotArc":
        """Arc with both control points moved by offset; tee and target stay."""
        return replace(self, p1=self.p1 + offset, p2=self.p2 + offset)
