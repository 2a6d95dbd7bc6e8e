"""Base arc construction for a tee/target pair.

Models a golf shot as tee -> p1 -> p2 -> target, with p1 and p2 at the
working shot height H above the tee. The landing length

    l = L * H / (H - h * (1 - P2_RELATIVE))

stretches the arc for uphill shots (h > 0) and shortens it for downhill
shots, so a higher apex flattens the effective descent angle onto the target.
"""

import logging
from dataclasses import dataclass
from math import ceil
from typing import Optional

from shot_difficulty.constants import SearchConfig, ShotConfig
from shot_difficulty.core.cost_model import CostModel, PowerLawCostModel
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.search_state import SearchState
from shot_difficulty.model.shot_arc import ShotArc

logger = logging.getLogger(__name__)


@dataclass
class BaseTrajectory:
    """Unperturbed arc and the frame used to perturb it.

    Attributes:
        arc: Base arc (lifted tee/target, unshifted p1/p2)
        distance: Horizontal tee-to-target length L
        height: Working shot height H (possibly elevated)
        forward: Unit horizontal direction tee -> target
        right: forward x up
        up: World up axis
        state: Step counters seeded with any forced height steps
        initial_height_difficulty: Penalty for the forced elevation
    """

    arc: ShotArc
    distance: float
    height: float
    forward: Point3
    right: Point3
    up: Point3
    state: SearchState
    initial_height_difficulty: float


class TrajectoryBuilder:
    """Derives the two arc control points from tee and target."""

    def __init__(self, cost_model: Optional[CostModel] = None):
        self._cost_model = cost_model or PowerLawCostModel()

    @property
    def cost_model(self) -> CostModel:
        return self._cost_model

    def build(self, tee: Point3, target: Point3) -> BaseTrajectory:
        """Build the base arc.

        Args:
            tee: Tee position on the terrain
            target: Target position on the terrain

        Returns:
            BaseTrajectory with the arc, frame and seeded search state.
        """
        up = Point3.from_iterable(ShotConfig.UP)
        lift = up * ShotConfig.GROUND_OFFSET
        adjusted_tee = tee + lift
        adjusted_target = target + lift

        tee_to_target_xz = (adjusted_target - adjusted_tee).horizontal()
        distance = tee_to_target_xz.length()
        # Both points get the same lift, so take the rise from the raw inputs
        rise = target.y - tee.y

        # Target too high for the default apex: commit to extra height up front
        state = SearchState()
        height = ShotConfig.DEFAULT_SHOT_HEIGHT
        initial_height_difficulty = 0.0
        per_step = SearchConfig.HEIGHT_PER_STEP
        if rise + per_step > ShotConfig.DEFAULT_SHOT_HEIGHT:
            state.height_steps = 1 + ceil((rise - ShotConfig.DEFAULT_SHOT_HEIGHT) / per_step)
            height += state.height_steps * per_step
            initial_height_difficulty = self._cost_model.height_difficulty(state.height_steps * per_step)
            logger.debug(
                f"Target rises {rise:.2f} above tee: apex raised to {height:.2f} "
                f"({state.height_steps} steps, penalty {initial_height_difficulty:.2f})"
            )

        landing = (distance * height) / (height - rise * (1 - ShotConfig.P2_RELATIVE))

        if distance > 0.0:
            forward = tee_to_target_xz.normalized()
        else:
            logger.warning(f"Tee and target share a horizontal position at {tee}: using fallback forward axis")
            forward = Point3.from_iterable(ShotConfig.FALLBACK_FORWARD)
        right = forward.cross(up)

        p1 = adjusted_tee + forward * (landing * ShotConfig.P1_RELATIVE) + up * height
        p2 = adjusted_tee + forward * (landing * ShotConfig.P2_RELATIVE) + up * height

        return BaseTrajectory(
            arc=ShotArc(tee=adjusted_tee, p1=p1, p2=p2, target=adjusted_target),
            distance=distance,
            height=height,
            forward=forward,
            right=right,
            up=up,
            state=state,
            initial_height_difficulty=initial_height_difficulty,
        )
