"""Deterministic market model backed by discount curves.

Every path sees the same rates. Useful for checking products against
closed-form values: with a curve model, Monte Carlo valuation of a linear
product reduces to ordinary curve discounting.
"""

from typing import Mapping, Optional

from ficcmc.errors import ComputationError
from ficcmc.stochastic import PathVector

from .curves import DiscountCurve


class CurveMarketModel:
    """Market model whose numeraire is the deterministic bank account ``1 / P(0, t)``.

    Attributes:
        discount_curve: Curve defining the numeraire
        forward_curves: Named projection curves for forward rates
        horizon: Latest time the model answers for
    """

    def __init__(
        self,
        discount_curve: DiscountCurve,
        forward_curves: Optional[Mapping[str, DiscountCurve]] = None,
        num_paths: int = 1,
        horizon: float = 100.0,
    ):
        if num_paths < 1:
            raise ValueError("num_paths must be at least 1")
        self.discount_curve = discount_curve
        self.forward_curves = dict(forward_curves or {})
        self.horizon = horizon
        self._num_paths = num_paths

    @property
    def num_paths(self) -> int:
        return self._num_paths

    def _check_time(self, time: float) -> None:
        if time < 0 or time > self.horizon:
            raise ComputationError(
                f"Time {time} outside model horizon [0, {self.horizon}]"
            )

    def _projection_curve(self, curve_id: Optional[str]) -> DiscountCurve:
        if curve_id is None:
            return self.discount_curve
        try:
            return self.forward_curves[curve_id]
        except KeyError:
            raise ComputationError(
                f"Forward curve {curve_id!r} not available. "
                f"Available: {sorted(self.forward_curves)}"
            ) from None

    def forward_rate(
        self, curve_id: Optional[str], fixing_time: float, period_length: float
    ) -> PathVector:
        self._check_time(fixing_time)
        if period_length <= 0:
            raise ComputationError(f"Forward period length must be positive, got {period_length}")
        curve = self._projection_curve(curve_id)
        rate = curve.forward(fixing_time, period_length)
        return PathVector.constant(rate, self._num_paths, fixing_time)

    def numeraire(self, time: float) -> PathVector:
        self._check_time(time)
        return PathVector.constant(1.0 / self.discount_curve.df(time), self._num_paths, time)

    def discount_factor(self, time: float) -> PathVector:
        self._check_time(time)
        return PathVector.constant(self.discount_curve.df(time), self._num_paths, time)
