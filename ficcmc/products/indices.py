"""Coupon indices: the rate a period pays, as a function of its fixing time.

The set of variants is closed. The leg builder accepts exactly the classes
listed in :data:`COUPON_INDEX_TYPES` and rejects anything else.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector


class CouponIndex(ABC):
    """Rate observed at a fixing time."""

    @abstractmethod
    def value(self, fixing_time: float, model: MarketModel) -> PathVector:
        """Coupon rate fixed at ``fixing_time`` on each path."""
        pass


@dataclass(frozen=True)
class FixedCoupon(CouponIndex):
    """Constant coupon rate."""

    rate: float

    def value(self, fixing_time: float, model: MarketModel) -> PathVector:
        return PathVector.constant(self.rate, model.num_paths, fixing_time)


@dataclass(frozen=True)
class FloatingRateIndex(CouponIndex):
    """Forward rate of a named curve.

    The rate fixed at time ``t`` is the model's forward rate of ``curve_id``
    for the period starting at ``t + fixing_offset`` with length
    ``period_length``.

    Attributes:
        curve_id: Forward curve name, ``None`` for the model's own curve
        fixing_offset: Offset from fixing to period start
        period_length: Length of the rate's accrual period
    """

    curve_id: Optional[str]
    fixing_offset: float
    period_length: float

    def value(self, fixing_time: float, model: MarketModel) -> PathVector:
        return model.forward_rate(
            self.curve_id, fixing_time + self.fixing_offset, self.period_length
        )


@dataclass(frozen=True)
class LinearCombinationIndex(CouponIndex):
    """Weighted sum ``weight1 * index1 + weight2 * index2``."""

    weight1: float
    index1: CouponIndex
    weight2: float
    index2: CouponIndex

    def value(self, fixing_time: float, model: MarketModel) -> PathVector:
        first = self.index1.value(fixing_time, model) * self.weight1
        second = self.index2.value(fixing_time, model) * self.weight2
        return first + second


COUPON_INDEX_TYPES = (FixedCoupon, FloatingRateIndex, LinearCombinationIndex)
