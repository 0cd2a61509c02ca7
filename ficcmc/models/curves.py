"""
Initial discount curve used to set up the reference market models.
"""
import logging
import math
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)


class DiscountCurve:
    """Discount curve with log-linear interpolation on discount factors.

    Log discount factors are interpolated linearly between pillars, with the
    anchor ``P(0) = 1``. Beyond the last pillar the zero rate is held flat.
    Times are year fractions from the curve's reference date.
    """

    def __init__(self,
                 pillar_times: Sequence[float],
                 discount_factors: Sequence[float],
                 name: str = ""):
        """
        Initialize discount curve.

        Args:
            pillar_times: Pillar times in years, all positive
            discount_factors: Discount factors at pillar times
            name: Curve name
        """
        if len(pillar_times) != len(discount_factors):
            raise ValueError("Pillar times and discount factors must have same length")
        if len(pillar_times) < 1:
            raise ValueError("Need at least 1 pillar point")

        for i, df in enumerate(discount_factors):
            if df <= 0:
                raise ValueError(f"Discount factor at pillar {i} must be positive: {df}")

        sorted_pairs = sorted(zip(pillar_times, discount_factors))
        times = np.array([p[0] for p in sorted_pairs], dtype=float)
        if times[0] <= 0:
            raise ValueError(f"Pillar times must be positive, got {times[0]}")
        if len(np.unique(times)) != len(times):
            raise ValueError("Duplicate pillar times not allowed")

        dfs = np.array([p[1] for p in sorted_pairs], dtype=float)
        increases = np.diff(dfs)
        for i in np.nonzero(increases > 1e-6)[0]:
            logger.warning(
                "Discount factors increasing at pillar %s (increase = %.8f)",
                i + 1,
                increases[i],
            )

        self.name = name
        self.pillar_times = times
        self.discount_factors = dfs
        self._nodes = np.concatenate(([0.0], times))
        self._log_dfs = np.concatenate(([0.0], np.log(dfs)))

    @classmethod
    def flat(cls, rate: float, name: str = "", horizon: float = 100.0) -> "DiscountCurve":
        """Curve with a flat continuously compounded zero rate."""
        return cls([horizon], [math.exp(-rate * horizon)], name=name)

    def _log_df(self, t):
        t = np.asarray(t, dtype=float)
        inside = np.interp(t, self._nodes, self._log_dfs)
        last_time = self._nodes[-1]
        last_zero = -self._log_dfs[-1] / last_time
        return np.where(t > last_time, -last_zero * t, inside)

    def df(self, t):
        """Discount factor at time t (scalar or array)."""
        result = np.exp(self._log_df(np.maximum(t, 0.0)))
        return float(result) if np.ndim(result) == 0 else result

    def zero(self, t: float) -> float:
        """Continuously compounded zero rate at time t."""
        if t <= 0:
            return float(-self._log_dfs[1] / self._nodes[1])
        return float(-self._log_df(t) / t)

    def forward(self, t: float, period_length: float) -> float:
        """Simply compounded forward rate over [t, t + period_length]."""
        if period_length <= 0:
            raise ValueError("Forward period must be positive")
        return (self.df(t) / self.df(t + period_length) - 1.0) / period_length

    def instantaneous_forward(self, t, bump: float = 1e-6):
        """Instantaneous forward rate ``-d log P / dt`` by central difference."""
        t = np.asarray(t, dtype=float)
        lower = np.maximum(t - bump, 0.0)
        upper = t + bump
        result = -(self._log_df(upper) - self._log_df(lower)) / (upper - lower)
        return float(result) if np.ndim(result) == 0 else result

    def __repr__(self) -> str:
        return f"DiscountCurve(name={self.name!r}, pillars={len(self.pillar_times)})"
