"""Data model classes for shot difficulty scoring.

- Point3: 3D vector atom (y-up)
- TerrainMesh: Read-only triangle collection (TriangleSource adapts providers)
- Intersection: Closest ray hit
- ShotArc: tee -> p1 -> p2 -> target polyline
- SearchState: Step counters of the height/curve/combo tracks
- ShotTrack: Which track resolved a shot
- DifficultyResult: Score, control points and search diagnostics
"""

from shot_difficulty.model.difficulty_result import DifficultyResult
from shot_difficulty.model.intersection import Intersection
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.search_state import (
    ADJUSTMENT_TRACKS,
    SearchState,
    ShotTrack,
)
from shot_difficulty.model.shot_arc import ShotArc
from shot_difficulty.model.terrain_mesh import TerrainMesh, TriangleSource

__all__ = [
    "Point3",
    "TerrainMesh",
    "TriangleSource",
    "Intersection",
    "ShotArc",
    "SearchState",
    "ShotTrack",
    "ADJUSTMENT_TRACKS",
    "DifficultyResult",
]
