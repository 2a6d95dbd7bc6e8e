"""Segment and ray intersection against a terrain triangle mesh.

Each triangle hit test solves the 3x3 linear system

    [-d | e1 | e2] (t, u, v)^T = origin - v0

where d is the ray direction, e1 = v1 - v0 and e2 = v2 - v0. t is the ray
parameter and (u, v) the barycentric coordinates of the hit on the triangle
plane. The system is solved for all triangles at once with Cramer's rule
(scalar triple products), so no matrix is ever inverted.

Near-singular systems (degenerate triangles, rays parallel to the triangle
plane) are masked out before dividing, so NaN/Inf never reach the hit tests.

A hit is valid when u >= 0, v >= 0, u + v <= 1 and
- segment test: 0 < t < 1 (open interval, endpoints excluded)
- ray test: t > 0

The scan is brute force over every triangle: an OR-reduction for segment
tests and a MIN-reduction for the closest ray hit.
"""

import logging
from typing import Optional

import numpy as np

from shot_difficulty.constants import IntersectionConfig
from shot_difficulty.model.intersection import Intersection
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.shot_arc import ShotArc
from shot_difficulty.model.terrain_mesh import TerrainMesh

logger = logging.getLogger(__name__)


class TerrainIntersector:
    """Static hit tests against a borrowed, read-only TerrainMesh.

    Example:
        blocked = TerrainIntersector.segment_blocked(start=tee, end=p1, mesh=mesh)
        hit = TerrainIntersector.closest_intersection(origin=eye, direction=ray, mesh=mesh)
    """

    @staticmethod
    def solve(origin: Point3, direction: Point3, mesh: TerrainMesh) -> tuple[np.ndarray, np.ndarray]:
        """Solve the ray/plane system for every triangle.

        Args:
            origin: Ray origin
            direction: Ray direction (any length; t scales with it)
            mesh: Terrain to test

        Returns:
            Tuple (t, inside): t is the ray parameter per triangle (0 where the
            system is singular) and inside is True where the system is solvable
            and the hit lies within the triangle.
        """
        if mesh.triangle_count == 0:
            return np.zeros(0), np.zeros(0, dtype=bool)

        d = direction.as_array()
        e1, e2 = mesh.edges
        normal = mesh.normals
        b = origin.as_array() - mesh.origins

        det = -(normal @ d)

        # Relative threshold: independent of mesh and ray scale
        scale = np.linalg.norm(d) * mesh.normal_lengths
        solvable = np.abs(det) > IntersectionConfig.DETERMINANT_EPSILON * scale
        safe_det = np.where(solvable, det, 1.0)

        t = np.einsum("ij,ij->i", b, normal) / safe_det
        u = -(np.cross(b, e2) @ d) / safe_det
        v = -(np.cross(e1, b) @ d) / safe_det

        slack = IntersectionConfig.BARYCENTRIC_EPSILON
        inside = solvable & (u >= -slack) & (v >= -slack) & (u + v <= 1.0 + slack)
        return np.where(solvable, t, 0.0), inside

    @staticmethod
    def segment_blocked(start: Point3, end: Point3, mesh: TerrainMesh) -> bool:
        """True if the open segment start -> end crosses any triangle.

        Hits at (or within ENDPOINT_EPSILON of) either endpoint do not count,
        since tee and target sit at or near terrain height.
        """
        t, inside = TerrainIntersector.solve(origin=start, direction=end - start, mesh=mesh)
        eps = IntersectionConfig.ENDPOINT_EPSILON
        return bool(np.any(inside & (t > eps) & (t < 1.0 - eps)))

    @staticmethod
    def path_clear(
        tee: Point3,
        p1: Point3,
        p2: Point3,
        target: Point3,
        mesh: TerrainMesh,
    ) -> bool:
        """True iff none of the legs tee->p1, p1->p2, p2->target is blocked."""
        return (
            not TerrainIntersector.segment_blocked(start=tee, end=p1, mesh=mesh)
            and not TerrainIntersector.segment_blocked(start=p1, end=p2, mesh=mesh)
            and not TerrainIntersector.segment_blocked(start=p2, end=target, mesh=mesh)
        )

    @staticmethod
    def arc_clear(arc: ShotArc, mesh: TerrainMesh) -> bool:
        """path_clear for a ShotArc."""
        return TerrainIntersector.path_clear(tee=arc.tee, p1=arc.p1, p2=arc.p2, target=arc.target, mesh=mesh)

    @staticmethod
    def closest_intersection(
        origin: Point3,
        direction: Point3,
        mesh: TerrainMesh,
    ) -> Optional[Intersection]:
        """Nearest hit with t > 0 along the infinite ray origin + t * direction.

        Args:
            origin: Ray origin
            direction: Ray direction; a zero vector never hits
            mesh: Terrain to test

        Returns:
            Intersection for the smallest valid t, or None if nothing is hit.
        """
        t, inside = TerrainIntersector.solve(origin=origin, direction=direction, mesh=mesh)
        candidates = np.where(inside & (t > 0.0), t, np.inf)
        if candidates.size == 0:
            return None

        index = int(np.argmin(candidates))
        closest_t = float(candidates[index])
        if not np.isfinite(closest_t):
            return None

        logger.debug(f"Closest hit on triangle {index} at t={closest_t:.4f}")
        return Intersection(
            position=origin + direction * closest_t,
            distance=closest_t,
            triangle_index=index,
        )
