"""Configuration constants for Shot Difficulty.

All tunable parameters are centralized here.

Classes:
    ShotConfig: Arc geometry (default height, waypoint ratios, ground offset)
    SearchConfig: Step sizes, impossibility threshold, tie-break policy
    CostConfig: Default weights for the power-law cost model
    IntersectionConfig: Numerical tolerances for triangle hit tests
"""

from math import sqrt


class ShotConfig:
    """Idealized two-control-point arc geometry."""

    # Apex height of an unadjusted shot (world units above the tee)
    DEFAULT_SHOT_HEIGHT = 20.0

    # Waypoint positions as fractions of the landing length
    P1_RELATIVE = 0.5
    P2_RELATIVE = 0.7

    # Lift tee and target slightly to avoid immediate collisions with ground
    GROUND_OFFSET = 0.1

    # World up axis (y-up, x/z horizontal)
    UP = (0.0, 1.0, 0.0)

    # Forward axis used when tee and target share the same horizontal position
    FALLBACK_FORWARD = (1.0, 0.0, 0.0)


assert 0.0 < ShotConfig.P1_RELATIVE < ShotConfig.P2_RELATIVE < 1.0, "p1 must lie nearer the tee than p2"


class SearchConfig:
    """Greedy difficulty search parameters."""

    # Reflects a 400 yard shot, which can be considered impossible
    IMPOSSIBLE = 400.0

    # Returned instead of a difficulty when no clear path exists
    IMPOSSIBLE_DIFFICULTY = -1.0

    # The three step sizes relate as 1, 1, 1/sqrt(2): one combo step has the
    # same Euclidean magnitude as one pure height or curve step
    HEIGHT_PER_STEP = 1.0
    CURVE_PER_STEP = 1.0
    COMBO_PER_STEP = 1.0 / sqrt(2.0)

    # Candidates within this distance of the minimum count as tied
    TIE_EPSILON = 1e-9

    # Tie-break order among equally cheap tracks
    TRACK_PRIORITY = ("height", "curve", "combo")


assert SearchConfig.HEIGHT_PER_STEP > 0 and SearchConfig.CURVE_PER_STEP > 0 and SearchConfig.COMBO_PER_STEP > 0
assert set(SearchConfig.TRACK_PRIORITY) == {"height", "curve", "combo"}


class CostConfig:
    """Default weights for PowerLawCostModel.

    difficulty = weight * magnitude ** EXPONENT
    """

    HEIGHT_WEIGHT = 1.0
    CURVE_WEIGHT = 1.5
    COMBO_WEIGHT = 1.25
    EXPONENT = 1.5


assert CostConfig.EXPONENT > 0, "Cost must be strictly increasing"
assert min(CostConfig.HEIGHT_WEIGHT, CostConfig.CURVE_WEIGHT, CostConfig.COMBO_WEIGHT) > 0


class IntersectionConfig:
    """Numerical tolerances for ray/segment versus triangle tests."""

    # Systems with |det| below this fraction of |d| * |e1 x e2| are treated as
    # singular (degenerate triangle or ray parallel to its plane)
    DETERMINANT_EPSILON = 1e-9

    # Segment hits with t within this distance of 0 or 1 are endpoint touches
    ENDPOINT_EPSILON = 1e-6

    # Barycentric bounds are exact (u >= 0, v >= 0, u + v <= 1); hits exactly on
    # a shared edge count for both triangles
    BARYCENTRIC_EPSILON = 0.0
