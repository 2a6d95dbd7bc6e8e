"""Intersection - Result of a ray versus terrain query."""

from dataclasses import dataclass

from shot_difficulty.model.point3 import Point3


@dataclass(frozen=True)
class Intersection:
    """Closest hit along a ray.

    Attributes:
        position: World position of the hit (origin + distance * direction)
        distance: Ray parameter t of the hit, always > 0. Equals the metric
            distance only when the direction is a unit vector.
        triangle_index: Index of the hit triangle in the mesh
    """

    position: Point3
    distance: float
    triangle_index: int
