"""Shared pytest fixtures for shot_difficulty tests.

Provides synthetic terrain meshes and builders for all tests.
All fixtures use explicit values with documented rationale.

COORDINATE SYSTEM:
    y is up, x/z are horizontal. Most tests shoot from tee (0, 0, 0) along +x
    to a target 100 units away, so the base arc has p1 at x=50 and p2 at x=70,
    both at y=20.1 (default height 20 plus the 0.1 ground offset), and
    right = forward x up = +z.
"""

from typing import Callable

import numpy as np
import pytest

from shot_difficulty.core.cost_model import PowerLawCostModel
from shot_difficulty.core.difficulty_search import DifficultyAnalyzer
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.terrain_mesh import TerrainMesh

Triangle = tuple[Point3, Point3, Point3]
WallFactory = Callable[..., list[Triangle]]


# =============================================================================
# MESH BUILDERS
# =============================================================================


def build_wall(
    x: float,
    half_width: float,
    top: float,
    bottom: float = 0.0,
    z_center: float = 0.0,
) -> list[Triangle]:
    """Vertical rectangle in the plane x=const, split into two triangles.

    The shared diagonal runs corner to corner, so a horizontal line at
    height y crosses it at z = z_center + half_width * (2 * (y - bottom) / (top - bottom) - 1).
    """
    a = Point3(x, bottom, z_center - half_width)
    b = Point3(x, bottom, z_center + half_width)
    c = Point3(x, top, z_center + half_width)
    d = Point3(x, top, z_center - half_width)
    return [(a, b, c), (a, c, d)]


def build_heightfield(
    heights: np.ndarray,
    x_coords: np.ndarray,
    z_coords: np.ndarray,
) -> TerrainMesh:
    """Triangulate a regular height grid (two triangles per cell).

    Args:
        heights: Array of shape (len(x_coords), len(z_coords))
        x_coords: Grid x positions
        z_coords: Grid z positions
    """
    triangles: list[Triangle] = []
    for i in range(len(x_coords) - 1):
        for j in range(len(z_coords) - 1):
            a = Point3(x_coords[i], heights[i, j], z_coords[j])
            b = Point3(x_coords[i + 1], heights[i + 1, j], z_coords[j])
            c = Point3(x_coords[i + 1], heights[i + 1, j + 1], z_coords[j + 1])
            d = Point3(x_coords[i], heights[i, j + 1], z_coords[j + 1])
            triangles.append((a, b, c))
            triangles.append((a, c, d))
    return TerrainMesh.from_triangles(triangles)


# =============================================================================
# POINT FIXTURES
# =============================================================================


@pytest.fixture
def tee_at_origin() -> Point3:
    """Tee on flat ground at the origin."""
    return Point3(0.0, 0.0, 0.0)


@pytest.fixture
def target_100_east() -> Point3:
    """Target 100 units along +x, level with the tee."""
    return Point3(100.0, 0.0, 0.0)


# =============================================================================
# MESH FIXTURES
# =============================================================================


@pytest.fixture
def empty_mesh() -> TerrainMesh:
    """Mesh with no triangles; every arc is clear."""
    return TerrainMesh.empty()


@pytest.fixture
def flat_ground() -> list[Triangle]:
    """Ground plane y=0 covering x, z in [-500, 500] (two triangles)."""
    a = Point3(-500.0, 0.0, -500.0)
    b = Point3(500.0, 0.0, -500.0)
    c = Point3(500.0, 0.0, 500.0)
    d = Point3(-500.0, 0.0, 500.0)
    return [(a, b, c), (a, c, d)]


@pytest.fixture
def flat_ground_mesh(flat_ground: list[Triangle]) -> TerrainMesh:
    return TerrainMesh.from_triangles(flat_ground)


@pytest.fixture
def wall_factory() -> WallFactory:
    """Factory for wall triangles (see build_wall)."""
    return build_wall


@pytest.fixture
def low_wide_wall_mesh(flat_ground: list[Triangle]) -> TerrainMesh:
    """Ground plus a wall at x=60, 100 wide and 22 high.

    Blocks the p1 -> p2 leg of the base arc (y=20.1). Raising the arc by two
    height steps (y=22.1) clears it; sideways moves never do.
    """
    return TerrainMesh.from_triangles(flat_ground + build_wall(x=60.0, half_width=50.0, top=22.0))


@pytest.fixture
def narrow_tall_wall_mesh(flat_ground: list[Triangle]) -> TerrainMesh:
    """Ground plus a pole-like wall at x=60, 1 wide and 1000 high.

    Height alone cannot clear it within the budget; any sideways move of at
    least one step goes around it.
    """
    return TerrainMesh.from_triangles(flat_ground + build_wall(x=60.0, half_width=0.5, top=1000.0))


@pytest.fixture
def enclosing_wall_mesh(flat_ground: list[Triangle]) -> TerrainMesh:
    """Ground plus a wall at x=60 spanning 2000 wide and 1010 high.

    No adjustment reachable below the IMPOSSIBLE threshold clears it.
    """
    return TerrainMesh.from_triangles(
        flat_ground + build_wall(x=60.0, half_width=1000.0, top=1000.0, bottom=-10.0)
    )


@pytest.fixture
def ridge_mesh() -> TerrainMesh:
    """Heightfield with a Gaussian ridge (peak 25 at x=50) across the fairway.

    Grid covers x in [0, 100] and z in [-20, 20] in 5-unit cells. The ridge
    spans the whole z range, so only extra height gets the ball over it.
    """
    x_coords = np.linspace(0.0, 100.0, 21)
    z_coords = np.linspace(-20.0, 20.0, 9)
    ridge = 25.0 * np.exp(-((x_coords - 50.0) ** 2) / (2 * 8.0**2))
    heights = np.repeat(ridge[:, None], len(z_coords), axis=1)
    return build_heightfield(heights=heights, x_coords=x_coords, z_coords=z_coords)


# =============================================================================
# ANALYZER FIXTURES
# =============================================================================


@pytest.fixture
def analyzer() -> DifficultyAnalyzer:
    """Analyzer with the default PowerLawCostModel.

    Default costs: height h**1.5, curve 1.5 * c**1.5, combo 1.25 * k**1.5,
    so for a 100-unit shot the first prices are 101, 101.5 and 101.25.
    """
    return DifficultyAnalyzer(cost_model=PowerLawCostModel())

