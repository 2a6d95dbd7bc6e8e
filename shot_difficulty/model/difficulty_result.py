"""DifficultyResult - Outcome of one difficulty query."""

from dataclasses import dataclass, field
from typing import Optional

from shot_difficulty.constants import SearchConfig
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.search_state import SearchState, ShotTrack


@dataclass(frozen=True)
class DifficultyResult:
    """Difficulty score plus the control points of the playable arc.

    Attributes:
        difficulty: Score >= distance, or IMPOSSIBLE_DIFFICULTY (-1)
        p1: Ascending control point of the chosen (or last tried) arc
        p2: Descending control point of the chosen (or last tried) arc
        distance: Horizontal tee-to-target length, whatever the outcome
        track: Track that cleared the terrain, None when impossible
        side: "left" or "right" for curve/combo shots, else None
        state: Step counters when the search stopped
        iterations: Number of search loop iterations run
    """

    difficulty: float
    p1: Point3
    p2: Point3
    distance: float
    track: Optional[ShotTrack] = None
    side: Optional[str] = None
    state: SearchState = field(default_factory=SearchState)
    iterations: int = 0

    @property
    def is_impossible(self) -> bool:
        return self.difficulty == SearchConfig.IMPOSSIBLE_DIFFICULTY

    def as_tuple(self) -> tuple[float, Point3, Point3, float]:
        """(difficulty, p1, p2, distance) as exposed to game logic."""
        return self.difficulty, self.p1, self.p2, self.distance
