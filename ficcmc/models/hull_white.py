"""One-factor Hull-White short rate model.

The short rate is ``r(t) = x(t) + alpha(t)`` where the state ``x`` follows an
Ornstein-Uhlenbeck process started at zero,

    dx = -a x dt + sigma dW,

and ``alpha`` fits the model to the initial discount curve:

    alpha(t) = f(0, t) + sigma^2 / (2 a^2) * (1 - exp(-a t))^2.

The state is stepped exactly on the time grid. The numeraire is the bank
account, integrated with the trapezoid rule on the grid and rolled to off-grid
times with the zero bond from the last grid time. Zero bond prices,
and hence forward rates, use the analytic affine formula

    P(t, T) = P(0, T) / P(0, t)
              * exp(B f(0, t) - sigma^2 / (4 a) (1 - exp(-2 a t)) B^2 - B r(t)),
    B = (1 - exp(-a (T - t))) / a.
"""

from typing import Mapping, Optional, Sequence

import numpy as np

from ficcmc.config import DEFAULT_CONFIG, ValuationConfig
from ficcmc.errors import ComputationError
from ficcmc.stochastic import PathVector

from .curves import DiscountCurve
from .simulation import SimulationModel


class HullWhiteModel(SimulationModel):
    """Simulated Hull-White model answering the :class:`MarketModel` queries.

    Args:
        curve: Initial discount curve the model is fitted to
        mean_reversion: Mean reversion speed ``a``, positive
        volatility: Short rate volatility ``sigma``, non-negative
        time_grid: Simulation times, starting at 0
        config: Path count, seed and sampling options
        forward_curve_spreads: Deterministic basis spread per forward curve
            name. ``None`` accepts any curve name with zero spread.
    """

    def __init__(
        self,
        curve: DiscountCurve,
        mean_reversion: float,
        volatility: float,
        time_grid: Sequence[float],
        config: ValuationConfig = DEFAULT_CONFIG,
        forward_curve_spreads: Optional[Mapping[str, float]] = None,
    ):
        if mean_reversion <= 0:
            raise ValueError(f"mean_reversion must be positive, got {mean_reversion}")
        if volatility < 0:
            raise ValueError(f"volatility must be non-negative, got {volatility}")
        super().__init__(time_grid, config)
        self.curve = curve
        self.mean_reversion = mean_reversion
        self.volatility = volatility
        self.forward_curve_spreads = (
            None if forward_curve_spreads is None else dict(forward_curve_spreads)
        )
        self._short_rates: Optional[np.ndarray] = None
        self._bank_account: Optional[np.ndarray] = None

    def _alpha(self, t):
        a, sigma = self.mean_reversion, self.volatility
        return self.curve.instantaneous_forward(t) + sigma**2 / (2 * a**2) * (1 - np.exp(-a * t)) ** 2

    def _simulate(self) -> None:
        a, sigma = self.mean_reversion, self.volatility
        grid = self.time_grid
        dt = np.diff(grid)
        increments = self._brownian_increments()

        # Exact OU transition: the variance of the step replaces sigma^2 dt.
        decay = np.exp(-a * dt)
        scale = sigma * np.sqrt((1 - np.exp(-2 * a * dt)) / (2 * a * dt))

        state = np.zeros((len(grid), self.num_paths))
        for step in range(len(dt)):
            state[step + 1] = state[step] * decay[step] + scale[step] * increments[step]

        self._short_rates = state + np.asarray(self._alpha(grid))[:, None]
        integral = np.zeros_like(self._short_rates)
        integral[1:] = np.cumsum(
            0.5 * (self._short_rates[1:] + self._short_rates[:-1]) * dt[:, None], axis=0
        )
        self._bank_account = np.exp(integral)

    def short_rate(self, time: float) -> PathVector:
        index = self.time_index(time)
        return self._memoized(
            ("short_rate", index),
            lambda: PathVector(self.time_grid[index], self._short_rates[index]),
        )

    def numeraire(self, time: float) -> PathVector:
        index = self.time_index(time)
        grid_time = self.time_grid[index]
        if time - grid_time <= 1e-12:
            return self._memoized(
                ("numeraire", index),
                lambda: PathVector(grid_time, self._bank_account[index]),
            )
        # Off the grid: roll the bank account forward with the bond to ``time``
        return self._memoized(
            ("numeraire", index, time),
            lambda: (self.numeraire(grid_time) / self.zero_bond(grid_time, time)).at_time(time),
        )

    def discount_factor(self, time: float) -> PathVector:
        return (self.numeraire(0.0) / self.numeraire(time)).at_time(time)

    def zero_bond(self, time: float, maturity: float) -> PathVector:
        """Simulated price at ``time`` of a zero bond maturing at ``maturity``.

        Off-grid observation times use the state at the last grid time.
        """
        if maturity < time:
            raise ComputationError(f"Bond maturity {maturity} before observation time {time}")
        index = self.time_index(time)
        return self._memoized(
            ("zero_bond", index, maturity),
            lambda: self._zero_bond(index, maturity),
        )

    def _zero_bond(self, index: int, maturity: float) -> PathVector:
        a, sigma = self.mean_reversion, self.volatility
        t = self.time_grid[index]
        b = (1 - np.exp(-a * (maturity - t))) / a
        log_a = (
            np.log(self.curve.df(maturity) / self.curve.df(t))
            + b * self.curve.instantaneous_forward(t)
            - sigma**2 / (4 * a) * (1 - np.exp(-2 * a * t)) * b**2
        )
        return PathVector(t, np.exp(log_a - b * self._short_rates[index]))

    def forward_rate(
        self, curve_id: Optional[str], fixing_time: float, period_length: float
    ) -> PathVector:
        """Forward rate over ``[fixing_time, fixing_time + period_length]``.

        Both bonds are observed at the last grid time not after ``fixing_time``.
        """
        if period_length <= 0:
            raise ComputationError(f"Forward period length must be positive, got {period_length}")
        spread = self._basis_spread(curve_id)
        start = self.zero_bond(fixing_time, fixing_time)
        end = self.zero_bond(fixing_time, fixing_time + period_length)
        return ((start / end - 1.0) / period_length + spread).at_time(fixing_time)

    def _basis_spread(self, curve_id: Optional[str]) -> float:
        if curve_id is None or self.forward_curve_spreads is None:
            return 0.0
        try:
            return self.forward_curve_spreads[curve_id]
        except KeyError:
            raise ComputationError(
                f"Forward curve {curve_id!r} not available. "
                f"Available: {sorted(self.forward_curve_spreads)}"
            ) from None
