"""The period: atomic cashflow unit of a leg."""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector

from .base import Product
from .indices import CouponIndex
from .notionals import Notional


@dataclass(frozen=True, eq=False)
class Period(Product):
    """Coupon period with optional notional exchange.

    Attributes:
        fixing_time: Time the coupon rate is fixed
        payment_time: Time the coupon is paid
        period_start: Start of the period; notional observation time and
            time of the initial notional exchange
        period_end: End of the period; time of the final notional exchange
        notional: Notional of the period
        coupon: Coupon index of the period
        period_length: Accrual fraction applied to the coupon rate
        pay_coupon: Whether the coupon is paid
        exchange_notional: Whether the notional is exchanged, ``+N`` at
            period start and ``-N`` at period end
    """

    fixing_time: float
    payment_time: float
    period_start: float
    period_end: float
    notional: Notional
    coupon: CouponIndex
    period_length: float
    pay_coupon: bool = True
    exchange_notional: bool = False

    def coupon_amount(self, model: MarketModel) -> PathVector:
        """Undiscounted coupon per unit notional: ``rate * period_length``."""
        return self.coupon.value(self.fixing_time, model) * self.period_length

    def value(self, evaluation_time: float, model: MarketModel) -> PathVector:
        # Cashflows strictly before the evaluation time are settled.
        pays_coupon = self.pay_coupon and self.payment_time >= evaluation_time
        pays_start = self.exchange_notional and self.period_start >= evaluation_time
        pays_end = self.exchange_notional and self.period_end >= evaluation_time
        if not (pays_coupon or pays_start or pays_end):
            return PathVector.zeros(model.num_paths, evaluation_time)

        amount = self.notional.value(self.period_start, model)
        total = PathVector.zeros(model.num_paths, evaluation_time)
        if pays_coupon:
            cashflow = amount * self.coupon_amount(model)
            total = total + cashflow / model.numeraire(self.payment_time)
        if pays_start:
            total = total + amount / model.numeraire(self.period_start)
        if pays_end:
            total = total - amount / model.numeraire(self.period_end)

        return (total * model.numeraire(evaluation_time)).at_time(evaluation_time)


class PeriodArena:
    """Append-only store of constructed periods.

    Periods are addressed by their insertion index. Nothing can be removed
    or replaced, so an index handed out once refers to the same period for
    the arena's lifetime.
    """

    __slots__ = ("_periods",)

    def __init__(self):
        self._periods: List[Period] = []

    def append(self, period: Period) -> int:
        """Store ``period`` and return its index."""
        self._periods.append(period)
        return len(self._periods) - 1

    def __getitem__(self, index: int) -> Period:
        return self._periods[index]

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(tuple(self._periods))

    @property
    def periods(self) -> Tuple[Period, ...]:
        """Snapshot of the stored periods in insertion order."""
        return tuple(self._periods)
