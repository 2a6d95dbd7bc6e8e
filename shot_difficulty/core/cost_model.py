"""Difficulty cost functions for the three adjustment tracks.

Maps a step magnitude to an additive difficulty penalty. Any model plugged
into the search must be 0 at 0, continuous and strictly increasing, otherwise
the search is no longer guaranteed to terminate below IMPOSSIBLE.
"""

from abc import ABC, abstractmethod
from math import hypot, inf
from typing import Iterable

from shot_difficulty.constants import CostConfig


class CostModel(ABC):
    """Pluggable monotonic cost interface."""

    @abstractmethod
    def height_difficulty(self, height: float) -> float:
        """Penalty for raising the apex by height."""

    @abstractmethod
    def curve_difficulty(self, curve: float) -> float:
        """Penalty for bending the arc sideways by curve."""

    @abstractmethod
    def combo_difficulty(self, height: float, curve: float) -> float:
        """Penalty for a diagonal up-and-sideways adjustment."""

    def check_monotonic(self, samples: Iterable[float]) -> bool:
        """Check the model contract on a sample grid.

        Args:
            samples: Non-negative magnitudes (sorted internally, 0 added)

        Returns:
            True if every track is 0 at 0 and strictly increasing on the grid.
        """
        grid = sorted({0.0, *samples})
        for cost in (
            self.height_difficulty,
            self.curve_difficulty,
            lambda s: self.combo_difficulty(s, s),
        ):
            values = [cost(s) for s in grid]
            if values[0] != 0.0:
                return False
            if any(later <= earlier for earlier, later in zip(values, values[1:])):
                return False
        return True


def _check_magnitude(value: float, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} magnitude must be non-negative, got {value}")


def _power(magnitude: float, exponent: float) -> float:
    """magnitude ** exponent, saturating to inf instead of overflowing."""
    try:
        return magnitude**exponent
    except OverflowError:
        return inf


class PowerLawCostModel(CostModel):
    """Default cost model: weight * magnitude ** exponent.

    The combo track uses the Euclidean magnitude sqrt(height^2 + curve^2), so
    a combo step scaled by 1/sqrt(2) on both axes costs like a unit step of
    magnitude 1 weighted by COMBO_WEIGHT.

    Example:
        model = PowerLawCostModel()
        model.height_difficulty(4.0)  # 1.0 * 4 ** 1.5 = 8.0
    """

    def __init__(
        self,
        height_weight: float = CostConfig.HEIGHT_WEIGHT,
        curve_weight: float = CostConfig.CURVE_WEIGHT,
        combo_weight: float = CostConfig.COMBO_WEIGHT,
        exponent: float = CostConfig.EXPONENT,
    ):
        if min(height_weight, curve_weight, combo_weight) <= 0:
            raise ValueError("Cost weights must be positive")
        if exponent <= 0:
            raise ValueError(f"Cost exponent must be positive, got {exponent}")
        self.height_weight = height_weight
        self.curve_weight = curve_weight
        self.combo_weight = combo_weight
        self.exponent = exponent

    def height_difficulty(self, height: float) -> float:
        _check_magnitude(height, "Height")
        return self.height_weight * _power(height, self.exponent)

    def curve_difficulty(self, curve: float) -> float:
        _check_magnitude(curve, "Curve")
        return self.curve_weight * _power(curve, self.exponent)

    def combo_difficulty(self, height: float, curve: float) -> float:
        _check_magnitude(height, "Height")
        _check_magnitude(curve, "Curve")
        return self.combo_weight * _power(hypot(height, curve), self.exponent)

    def __repr__(self) -> str:
        return (
            f"PowerLawCostModel(height_weight={self.height_weight}, curve_weight={self.curve_weight}, "
            f"combo_weight={self.combo_weight}, exponent={self.exponent})"
        )
