"""Black-Scholes model for a single asset under the bank account measure."""

import math
from typing import Optional, Sequence

import numpy as np

from ficcmc.config import DEFAULT_CONFIG, ValuationConfig
from ficcmc.errors import ComputationError
from ficcmc.stochastic import PathVector

from .simulation import SimulationModel


class BlackScholesModel(SimulationModel):
    """Log-normal asset with constant rate and volatility.

    The asset is stepped exactly, ``S(t+dt) = S(t) exp((r - sigma^2/2) dt + sigma dW)``,
    so the grid only determines where the asset can be observed.
    """

    def __init__(
        self,
        spot: float,
        risk_free_rate: float,
        volatility: float,
        time_grid: Sequence[float],
        config: ValuationConfig = DEFAULT_CONFIG,
    ):
        if spot <= 0:
            raise ValueError(f"spot must be positive, got {spot}")
        if volatility < 0:
            raise ValueError(f"volatility must be non-negative, got {volatility}")
        super().__init__(time_grid, config)
        self.spot = spot
        self.risk_free_rate = risk_free_rate
        self.volatility = volatility
        self._asset: Optional[np.ndarray] = None

    def _simulate(self) -> None:
        r, sigma = self.risk_free_rate, self.volatility
        dt = np.diff(self.time_grid)
        log_steps = (r - 0.5 * sigma**2) * dt[:, None] + sigma * self._brownian_increments()
        log_paths = np.zeros((len(self.time_grid), self.num_paths))
        log_paths[1:] = np.cumsum(log_steps, axis=0)
        self._asset = self.spot * np.exp(log_paths)

    def asset_value(self, time: float) -> PathVector:
        index = self.time_index(time)
        return self._memoized(
            ("asset", index),
            lambda: PathVector(self.time_grid[index], self._asset[index]),
        )

    def numeraire(self, time: float) -> PathVector:
        self.time_index(time)
        return PathVector.constant(math.exp(self.risk_free_rate * time), self.num_paths, time)

    def discount_factor(self, time: float) -> PathVector:
        self.time_index(time)
        return PathVector.constant(math.exp(-self.risk_free_rate * time), self.num_paths, time)

    def forward_rate(
        self, curve_id: Optional[str], fixing_time: float, period_length: float
    ) -> PathVector:
        self.time_index(fixing_time)
        if period_length <= 0:
            raise ComputationError(f"Forward period length must be positive, got {period_length}")
        rate = (math.exp(self.risk_free_rate * period_length) - 1.0) / period_length
        return PathVector.constant(rate, self.num_paths, fixing_time)
