"""Shot Difficulty - Score golf shots over 3D terrain.

Rates how hard it is to play from a tee to a target by shaping an idealized
two-control-point arc until it clears the terrain mesh:
- Vectorized segment/ray versus triangle intersection
- Base arc construction with forced elevation for raised targets
- Greedy height/curve/combo search with pluggable monotonic costs

Modules:
    core: Algorithms (TerrainIntersector, TrajectoryBuilder, CostModel, DifficultyAnalyzer)
    model: Data structures (Point3, TerrainMesh, Intersection, ShotArc, SearchState, DifficultyResult)

Example:
    from shot_difficulty.core import DifficultyAnalyzer
    from shot_difficulty.model import Point3, TerrainMesh
"""
