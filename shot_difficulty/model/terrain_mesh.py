"""TerrainMesh - Read-only triangle collection borrowed from the game world.

The terrain provider owns grid generation and buffer layout. This module only
needs the ability to enumerate triangles (three vertex positions each), which
it copies into a single read-only (n, 3, 3) float64 array for vectorized
intersection tests.
"""

import logging
from typing import Iterable, Iterator, Protocol, Sequence, Union

import numpy as np

from shot_difficulty.model.point3 import Point3

logger = logging.getLogger(__name__)

VertexLike = Union[Point3, Sequence[float]]
TriangleLike = Sequence[VertexLike]


class TriangleSource(Protocol):
    """Anything that can enumerate terrain triangles.

    Implemented by the external terrain collaborator; its storage layout stays
    on its side of this boundary.
    """

    def iter_triangles(self) -> Iterable[TriangleLike]:
        ...


class TerrainMesh:
    """Immutable triangle mesh.

    Triangle winding is whatever the provider produced; hit tests are
    two-sided so winding does not matter.

    Example:
        mesh = TerrainMesh.from_triangles([
            (Point3(0, 0, 0), Point3(10, 0, 0), Point3(0, 0, 10)),
        ])
        print(mesh.triangle_count)
    """

    def __init__(self, vertices: np.ndarray):
        """Initialize from an (n, 3, 3) array of triangle vertices.

        Args:
            vertices: Array indexed [triangle, corner, axis]

        Raises:
            ValueError: If the array has the wrong shape or non-finite values.
        """
        array = np.array(vertices, dtype=np.float64)
        if array.size == 0:
            array = array.reshape(0, 3, 3)
        if array.ndim != 3 or array.shape[1:] != (3, 3):
            raise ValueError(f"TerrainMesh expects an (n, 3, 3) vertex array, got shape {array.shape}")
        if not np.all(np.isfinite(array)):
            raise ValueError("TerrainMesh vertices must be finite")
        self._vertices = _read_only(array)

        # Per-triangle terms of the hit test, fixed for the life of the mesh
        self._origins = _read_only(array[:, 0].copy())
        self._edges1 = _read_only(array[:, 1] - array[:, 0])
        self._edges2 = _read_only(array[:, 2] - array[:, 0])
        self._normals = _read_only(np.cross(self._edges1, self._edges2).reshape(-1, 3))
        self._normal_lengths = _read_only(np.linalg.norm(self._normals, axis=1))

    @classmethod
    def empty(cls) -> "TerrainMesh":
        """Mesh without triangles; every path over it is clear."""
        return cls(np.zeros((0, 3, 3)))

    @classmethod
    def from_triangles(cls, triangles: Iterable[TriangleLike]) -> "TerrainMesh":
        """Build from an iterable of vertex triples (Point3 or 3-sequences)."""
        rows = [[list(vertex) for vertex in triangle] for triangle in triangles]
        if not rows:
            return cls.empty()
        return cls(np.asarray(rows, dtype=np.float64))

    @classmethod
    def from_source(cls, source: TriangleSource) -> "TerrainMesh":
        """Snapshot the triangles of an external terrain provider."""
        mesh = cls.from_triangles(source.iter_triangles())
        logger.info(f"Loaded terrain mesh with {mesh.triangle_count} triangles")
        return mesh

    @property
    def vertices(self) -> np.ndarray:
        """Read-only (n, 3, 3) vertex array."""
        return self._vertices

    @property
    def origins(self) -> np.ndarray:
        """First vertex v0 of each triangle, shape (n, 3)."""
        return self._origins

    @property
    def edges(self) -> tuple[np.ndarray, np.ndarray]:
        """Edge vectors (v1 - v0, v2 - v0), each of shape (n, 3)."""
        return self._edges1, self._edges2

    @property
    def normals(self) -> np.ndarray:
        """Unnormalized normals e1 x e2, shape (n, 3)."""
        return self._normals

    @property
    def normal_lengths(self) -> np.ndarray:
        """|e1 x e2| per triangle (twice the triangle area)."""
        return self._normal_lengths

    @property
    def triangle_count(self) -> int:
        return int(self._vertices.shape[0])

    def __len__(self) -> int:
        return self.triangle_count

    def __iter__(self) -> Iterator[tuple[Point3, Point3, Point3]]:
        for v0, v1, v2 in self._vertices:
            yield Point3.from_iterable(v0), Point3.from_iterable(v1), Point3.from_iterable(v2)

    def __repr__(self) -> str:
        return f"TerrainMesh(triangles={self.triangle_count})"


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array
