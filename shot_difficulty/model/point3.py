"""Point3 - The 3D vector atom for shot geometry.

Used for world positions (tee, target, control points, hit positions) and
directions (forward, right, up, ray directions). Coordinates are y-up:
x and z span the horizontal plane.
"""

from dataclasses import dataclass
from math import hypot, isfinite
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class Point3:
    """A 3D vector with value semantics.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate (up)
        z: Horizontal coordinate

    Example:
        tee = Point3(x=0.0, y=2.0, z=0.0)
        target = tee + Point3(150.0, 0.0, 0.0)
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        if not (isfinite(self.x) and isfinite(self.y) and isfinite(self.z)):
            raise ValueError(f"Point3 requires finite coordinates, got ({self.x}, {self.y}, {self.z})")

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Point3":
        """Build a point from any 3-element sequence or array."""
        x, y, z = (float(v) for v in values)
        return cls(x=x, y=y, z=z)

    @classmethod
    def zero(cls) -> "Point3":
        return cls(x=0.0, y=0.0, z=0.0)

    def __add__(self, other: "Point3") -> "Point3":
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Point3":
        return Point3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> "Point3":
        return Point3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def dot(self, other: "Point3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Point3") -> "Point3":
        """Right-handed cross product."""
        return Point3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return hypot(self.x, self.y, self.z)

    def horizontal(self) -> "Point3":
        """Projection onto the horizontal (x, z) plane."""
        return Point3(self.x, 0.0, self.z)

    def normalized(self) -> "Point3":
        """Unit vector in the same direction. The zero vector stays zero."""
        magnitude = self.length()
        if magnitude == 0.0:
            return self
        # Divide per component: 1 / magnitude overflows for subnormal vectors
        return Point3(self.x / magnitude, self.y / magnitude, self.z / magnitude)

    def is_close(self, other: "Point3", tol: float = 1e-9) -> bool:
        """Component-wise comparison with absolute tolerance."""
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol and abs(self.z - other.z) <= tol

    def as_array(self) -> np.ndarray:
        """Return a float64 array (x, y, z)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Point3(x={self.x:.3f}, y={self.y:.3f}, z={self.z:.3f})"
