"""Greedy difficulty search over height, curve and combo adjustments.

Starting from the base arc, each iteration:
1. Prices one more step on each track: distance + cost(steps + 1), with the
   forced initial height penalty added to curve and combo (bending the shot
   does not remove the need to reach an elevated target).
2. Gives up with IMPOSSIBLE_DIFFICULTY when all three prices exceed IMPOSSIBLE.
3. Advances the cheapest track. Prices within TIE_EPSILON of the minimum tie
   and are resolved in TRACK_PRIORITY order (height, curve, combo).
4. Shifts p1/p2 by the track's total offset (curve and combo try right first,
   then the mirrored left) and returns the price if the arc is clear.

Step counters are never decremented and cost functions are strictly
increasing, so prices never decrease between iterations and the loop ends
once every track is priced above IMPOSSIBLE.
"""

import logging
from math import inf, isnan
from typing import Optional

from shot_difficulty.constants import SearchConfig
from shot_difficulty.core.cost_model import CostModel, PowerLawCostModel
from shot_difficulty.core.terrain_intersector import TerrainIntersector
from shot_difficulty.core.trajectory_builder import BaseTrajectory, TrajectoryBuilder
from shot_difficulty.model.difficulty_result import DifficultyResult
from shot_difficulty.model.intersection import Intersection
from shot_difficulty.model.point3 import Point3
from shot_difficulty.model.search_state import ADJUSTMENT_TRACKS, SearchState, ShotTrack
from shot_difficulty.model.shot_arc import ShotArc
from shot_difficulty.model.terrain_mesh import TerrainMesh

logger = logging.getLogger(__name__)


class DifficultyAnalyzer:
    """Scores how hard it is to play a shot from tee to target over terrain.

    The terrain is borrowed per call and never stored, so one analyzer can
    serve any number of meshes.

    Example:
        analyzer = DifficultyAnalyzer()
        result = analyzer.calculate_difficulty(tee=tee, target=pin, mesh=mesh)
        if result.is_impossible:
            print("No playable line")
        else:
            print(f"Difficulty {result.difficulty:.1f} via {result.track.value}")
    """

    def __init__(
        self,
        cost_model: Optional[CostModel] = None,
        tie_epsilon: float = SearchConfig.TIE_EPSILON,
        max_iterations: Optional[int] = None,
    ):
        """Initialize the analyzer.

        Args:
            cost_model: Monotonic cost functions (PowerLawCostModel if not provided)
            tie_epsilon: Tolerance under which track prices count as equal
            max_iterations: Optional cap on search iterations (None searches until
                every track is priced above IMPOSSIBLE)
        """
        self._cost_model = cost_model or PowerLawCostModel()
        self._builder = TrajectoryBuilder(cost_model=self._cost_model)
        self._tie_epsilon = tie_epsilon
        self._max_iterations = max_iterations
        self._priority = tuple(ShotTrack(name) for name in SearchConfig.TRACK_PRIORITY)

    @property
    def cost_model(self) -> CostModel:
        return self._cost_model

    @property
    def builder(self) -> TrajectoryBuilder:
        return self._builder

    @property
    def max_iterations(self) -> Optional[int]:
        return self._max_iterations

    def closest_intersection(
        self,
        origin: Point3,
        direction: Point3,
        mesh: TerrainMesh,
    ) -> Optional[Intersection]:
        """Nearest terrain hit along a ray, for picking and collision queries."""
        return TerrainIntersector.closest_intersection(origin=origin, direction=direction, mesh=mesh)

    def calculate_difficulty(self, tee: Point3, target: Point3, mesh: TerrainMesh) -> DifficultyResult:
        """Find the cheapest unobstructed arc from tee to target.

        Args:
            tee: Tee position on the terrain
            target: Target position on the terrain
            mesh: Terrain triangles (read-only)

        Returns:
            DifficultyResult. difficulty is IMPOSSIBLE_DIFFICULTY (-1) when no
            clear arc exists within the cost budget; distance is always the
            horizontal tee-to-target length.
        """
        base = self._builder.build(tee=tee, target=target)
        state = base.state

        if TerrainIntersector.arc_clear(arc=base.arc, mesh=mesh):
            difficulty = base.distance + base.initial_height_difficulty
            logger.debug(f"Direct arc clear: difficulty {difficulty:.2f}")
            return DifficultyResult(
                difficulty=difficulty,
                p1=base.arc.p1,
                p2=base.arc.p2,
                distance=base.distance,
                track=ShotTrack.DIRECT,
                state=state.copy(),
            )

        last_arc = base.arc
        iterations = 0
        while True:
            if self._max_iterations is not None and iterations >= self._max_iterations:
                logger.warning(
                    f"Difficulty search stopped after {iterations} iterations without reaching "
                    f"IMPOSSIBLE; check that the cost model grows with step count"
                )
                return self._impossible(base=base, arc=last_arc, state=state, iterations=iterations)
            iterations += 1

            prices = self.track_prices(state=state, base=base)
            if all(price > SearchConfig.IMPOSSIBLE for price in prices.values()):
                logger.info(
                    f"Shot impossible after {iterations} iterations "
                    f"(distance {base.distance:.1f}, steps h={state.height_steps} "
                    f"c={state.curve_steps} k={state.combo_steps})"
                )
                return self._impossible(base=base, arc=last_arc, state=state, iterations=iterations)

            track = self.select_track(prices=prices)
            steps = state.advance(track)
            logger.debug(f"Iteration {iterations}: {track.value} step {steps} at price {prices[track]:.2f}")

            for side, offset in self._offsets(track=track, steps=steps, base=base):
                last_arc = base.arc.shifted(offset)
                if TerrainIntersector.arc_clear(arc=last_arc, mesh=mesh):
                    logger.debug(f"Resolved via {track.value} ({side or 'up'}) in {iterations} iterations")
                    return DifficultyResult(
                        difficulty=prices[track],
                        p1=last_arc.p1,
                        p2=last_arc.p2,
                        distance=base.distance,
                        track=track,
                        side=side,
                        state=state.copy(),
                        iterations=iterations,
                    )

    def track_prices(self, state: SearchState, base: BaseTrajectory) -> dict[ShotTrack, float]:
        """Total difficulty of taking one more step on each track."""
        cost = self._cost_model
        next_height = (state.height_steps + 1) * SearchConfig.HEIGHT_PER_STEP
        next_curve = (state.curve_steps + 1) * SearchConfig.CURVE_PER_STEP
        next_combo = (state.combo_steps + 1) * SearchConfig.COMBO_PER_STEP
        return {
            ShotTrack.HEIGHT: base.distance + cost.height_difficulty(next_height),
            ShotTrack.CURVE: base.distance + cost.curve_difficulty(next_curve) + base.initial_height_difficulty,
            ShotTrack.COMBO: (
                base.distance + cost.combo_difficulty(next_combo, next_combo) + base.initial_height_difficulty
            ),
        }

    def select_track(self, prices: dict[ShotTrack, float]) -> ShotTrack:
        """Cheapest track; near-equal prices go to the first in priority order.

        NaN prices never win; if every price is NaN the first track in
        priority order is returned.
        """
        cheapest = min((prices[track] for track in ADJUSTMENT_TRACKS if not isnan(prices[track])), default=inf)
        tolerance = self._tie_epsilon * max(1.0, abs(cheapest))
        return next(
            (track for track in self._priority if prices[track] <= cheapest + tolerance),
            self._priority[0],
        )

    @staticmethod
    def _offsets(
        track: ShotTrack,
        steps: int,
        base: BaseTrajectory,
    ) -> list[tuple[Optional[str], Point3]]:
        """Control point offsets to try for a track, as (side, offset) pairs."""
        lift = base.up * (steps * SearchConfig.HEIGHT_PER_STEP)
        sideways = base.right * (steps * SearchConfig.CURVE_PER_STEP)
        if track is ShotTrack.HEIGHT:
            return [(None, lift)]
        if track is ShotTrack.CURVE:
            return [("right", sideways), ("left", -sideways)]
        if track is ShotTrack.COMBO:
            return [("right", lift + sideways), ("left", lift - sideways)]
        raise ValueError(f"{track} is not an adjustment track")

    @staticmethod
    def _impossible(
        base: BaseTrajectory,
        arc: ShotArc,
        state: SearchState,
        iterations: int,
    ) -> DifficultyResult:
        return DifficultyResult(
            difficulty=SearchConfig.IMPOSSIBLE_DIFFICULTY,
            p1=arc.p1,
            p2=arc.p2,
            distance=base.distance,
            state=state.copy(),
            iterations=iterations,
        )


def calculate_difficulty(tee: Point3, target: Point3, mesh: TerrainMesh) -> DifficultyResult:
    """Score a shot with the default cost model.

    Shortcut for DifficultyAnalyzer().calculate_difficulty(...).
    """
    return DifficultyAnalyzer().calculate_difficulty(tee=tee, target=target, mesh=mesh)
