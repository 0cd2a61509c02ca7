"""Single-asset options valued against an :class:`AssetModel`."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ficcmc.models import AssetModel
from ficcmc.stochastic import PathVector

from .base import Product


@dataclass(frozen=True, eq=False)
class _SingleAssetOption(Product):
    maturity: float
    strike: float
    underlying_name: Optional[str] = None

    @abstractmethod
    def payoff(self, underlying: PathVector) -> PathVector:
        """Payoff at maturity given the underlying on each path."""
        pass

    def value(self, evaluation_time: float, model: AssetModel) -> PathVector:
        if self.maturity < evaluation_time:
            return PathVector.zeros(model.num_paths, evaluation_time)

        payoff = self.payoff(model.asset_value(self.maturity))
        discounted = payoff / model.numeraire(self.maturity) * model.numeraire(evaluation_time)
        return discounted.at_time(evaluation_time)


class EuropeanOption(_SingleAssetOption):
    """European call paying ``max(S(T) - K, 0)`` at maturity ``T``."""

    def payoff(self, underlying: PathVector) -> PathVector:
        return (underlying - self.strike).floor(0.0)


class DigitalOption(_SingleAssetOption):
    """Digital call paying 1 at maturity if ``S(T) > K``."""

    def payoff(self, underlying: PathVector) -> PathVector:
        return underlying.apply(lambda values: np.where(values > self.strike, 1.0, 0.0))
