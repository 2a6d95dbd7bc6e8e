"""Core algorithms for shot difficulty scoring.

- TerrainIntersector: Segment/ray versus triangle mesh tests
- TrajectoryBuilder: Base two-control-point arc from tee and target
- CostModel / PowerLawCostModel: Monotonic step cost functions
- DifficultyAnalyzer: Greedy height/curve/combo search
"""

from shot_difficulty.core.cost_model import CostModel, PowerLawCostModel
from shot_difficulty.core.difficulty_search import DifficultyAnalyzer, calculate_difficulty
from shot_difficulty.core.terrain_intersector import TerrainIntersector
from shot_difficulty.core.trajectory_builder import BaseTrajectory, TrajectoryBuilder

__all__ = [
    # Intersection
    "TerrainIntersector",
    # Trajectory
    "TrajectoryBuilder",
    "BaseTrajectory",
    # Cost
    "CostModel",
    "PowerLawCostModel",
    # Search
    "DifficultyAnalyzer",
    "calculate_difficulty",
]
