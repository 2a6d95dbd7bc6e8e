"""SearchState - Step counters of the three adjustment tracks.

Each counter records how far its track has been pushed. Counters only grow
during one difficulty computation; they are never reset or decremented.
"""

from dataclasses import dataclass
from enum import Enum


class ShotTrack(str, Enum):
    """How a shot was made playable."""

    DIRECT = "direct"  # Base arc was already clear
    HEIGHT = "height"
    CURVE = "curve"
    COMBO = "combo"


ADJUSTMENT_TRACKS = (ShotTrack.HEIGHT, ShotTrack.CURVE, ShotTrack.COMBO)


@dataclass
class SearchState:
    """Mutable step counters for one search.

    Attributes:
        height_steps: Extra apex height steps (may be seeded by the builder)
        curve_steps: Sideways steps
        combo_steps: Diagonal up-and-sideways steps
    """

    height_steps: int = 0
    curve_steps: int = 0
    combo_steps: int = 0

    def __post_init__(self) -> None:
        if min(self.height_steps, self.curve_steps, self.combo_steps) < 0:
            raise ValueError(f"Step counters must be non-negative: {self}")

    def steps(self, track: ShotTrack) -> int:
        """Current counter of an adjustment track."""
        if track is ShotTrack.HEIGHT:
            return self.height_steps
        if track is ShotTrack.CURVE:
            return self.curve_steps
        if track is ShotTrack.COMBO:
            return self.combo_steps
        raise ValueError(f"{track} has no step counter")

    def advance(self, track: ShotTrack) -> int:
        """Increment a track by one step and return the new count."""
        if track is ShotTrack.HEIGHT:
            self.height_steps += 1
        elif track is ShotTrack.CURVE:
            self.curve_steps += 1
        elif track is ShotTrack.COMBO:
            self.combo_steps += 1
        else:
            raise ValueError(f"{track} has no step counter")
        return self.steps(track)

    def copy(self) -> "SearchState":
        return SearchState(
            height_steps=self.height_steps,
            curve_steps=self.curve_steps,
            combo_steps=self.combo_steps,
        )
