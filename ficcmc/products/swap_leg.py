"""Swap legs built from elementary components.

Building a leg is a single forward pass over the schedule: one period per
schedule period, the coupon chosen from the index and spread, and, for an
accruing notional, each notional defined in terms of the period built just
before it. The resulting component tree is the pricing algorithm; valuation
just walks it.
"""

import logging
import warnings
from datetime import date
from numbers import Real
from typing import TYPE_CHECKING, List, Optional, Sequence, Union

import pandas as pd

from ficcmc.errors import ArgumentError, DegenerateScheduleWarning, UnsupportedVariantError
from ficcmc.models import MarketModel
from ficcmc.schedule import Schedule
from ficcmc.stochastic import PathVector

from .base import Product
from .collection import ProductCollection
from .indices import COUPON_INDEX_TYPES, CouponIndex, FixedCoupon, FloatingRateIndex, LinearCombinationIndex
from .notionals import AccruingNotional, ConstantNotional, Notional, as_notional
from .period import Period, PeriodArena

if TYPE_CHECKING:
    from ficcmc.descriptors.types import InterestRateSwapLegProductDescriptor

logger = logging.getLogger(__name__)

NotionalSpec = Union[Notional, float, Sequence[Union[Notional, float]]]
SpreadSpec = Union[float, Sequence[float]]


def _per_period(values, num_periods: int, label: str) -> Optional[list]:
    """Return ``values`` as a list if it is a per-period sequence, else None."""
    if isinstance(values, (Notional, Real)):
        return None
    try:
        items = list(values)
    except TypeError:
        return None
    if len(items) != num_periods:
        raise ArgumentError(
            f"Number of {label} ({len(items)}) must match number of periods ({num_periods})."
        )
    return items


def _coupon(index: Optional[CouponIndex], spread: float) -> CouponIndex:
    if index is None:
        return FixedCoupon(spread)
    if spread != 0:
        return LinearCombinationIndex(1.0, index, 1.0, FixedCoupon(spread))
    return index


def build_periods(
    schedule: Schedule,
    notional: NotionalSpec,
    index: Optional[CouponIndex] = None,
    spread: SpreadSpec = 0.0,
    *,
    pay_coupon: bool = True,
    exchange_notional: bool = False,
    accrue_notional: bool = False,
    strict: bool = False,
) -> ProductCollection:
    """Compose the periods of a swap leg.

    Args:
        schedule: Leg schedule
        notional: Notional (or scalar), or one per schedule period
        index: Floating coupon index, ``None`` for a fixed leg
        spread: Spread on the index (or the fixed rate), or one per period
        pay_coupon: Whether coupons are paid. Unpaid coupons still accrue
            into an accruing notional.
        exchange_notional: Exchange notional at start and end of each period
        accrue_notional: Each period's notional is the previous period's
            notional accrued with its coupon
        strict: Reject zero-length periods instead of dropping them

    Returns:
        Collection of the constructed periods in schedule order

    Raises:
        ArgumentError: On inconsistent arguments. Raised before any period
            is constructed.
        UnsupportedVariantError: If the notional or index type is not supported

    Examples:
        >>> schedule = Schedule.from_arrays([0, 1, 2, 3], [1, 2, 3, 4], [1, 1, 1, 1])
        >>> leg = build_periods(schedule, 100.0, None, 0.02)
        >>> len(leg)
        4
    """
    num_periods = len(schedule)

    notionals = _per_period(notional, num_periods, "notionals")
    spreads = _per_period(spread, num_periods, "spreads")

    if index is not None and not isinstance(index, COUPON_INDEX_TYPES):
        raise UnsupportedVariantError(
            f"Unsupported coupon index type {type(index).__name__}. "
            f"Supported: FixedCoupon, FloatingRateIndex, LinearCombinationIndex"
        )
    if notionals is None:
        notionals = [as_notional(notional)] * num_periods
    else:
        if accrue_notional:
            raise ArgumentError("An accruing notional requires a single initial notional.")
        notionals = [as_notional(n) for n in notionals]
    if spreads is None:
        spreads = [float(spread)] * num_periods
    else:
        spreads = [float(s) for s in spreads]

    degenerate = [i for i, period in enumerate(schedule) if period.period_length == 0]
    if strict and degenerate:
        raise ArgumentError(f"Schedule contains zero-length periods at indices {degenerate}.")

    arena = PeriodArena()
    current_notional = notionals[0] if num_periods else None
    for period_index, schedule_period in enumerate(schedule):
        fixing_time = schedule_period.fixing_time
        payment_time = schedule_period.payment_time
        period_length = schedule_period.period_length

        # Empty periods indicate an ill-specified product; they are not counted.
        if period_length == 0:
            logger.debug("Dropping zero-length period %s at fixing time %s", period_index, fixing_time)
            warnings.warn(
                f"Zero-length period {period_index} (fixing {fixing_time}) dropped from leg",
                DegenerateScheduleWarning,
                stacklevel=2,
            )
            continue

        if not accrue_notional:
            current_notional = notionals[period_index]

        period = Period(
            fixing_time=fixing_time,
            payment_time=payment_time,
            period_start=fixing_time,
            period_end=payment_time,
            notional=current_notional,
            coupon=_coupon(index, spreads[period_index]),
            period_length=period_length,
            pay_coupon=pay_coupon,
            exchange_notional=exchange_notional,
        )
        arena_index = arena.append(period)

        if accrue_notional:
            current_notional = AccruingNotional(current_notional, arena, arena_index)

    logger.debug(
        "Built leg with %s periods (%s zero-length dropped)", len(arena), len(degenerate)
    )
    return ProductCollection(arena.periods)


def construct_floating_index(
    curve_name: Optional[str], schedule: Schedule
) -> Optional[FloatingRateIndex]:
    """Floating index with the schedule's average fixing offset and period length.

    A single index object serves every period of the leg, so per-period
    fixing mechanics are approximated by the averages. Returns ``None`` when
    no curve name is given (fixed leg).
    """
    if curve_name is None:
        return None

    fixing_offset = 0.0
    period_length = 0.0
    for i, schedule_period in enumerate(schedule):
        fixing_offset *= i / (i + 1)
        fixing_offset += (schedule_period.period_start - schedule_period.fixing_time) / (i + 1)

        period_length *= i / (i + 1)
        period_length += schedule_period.period_length / (i + 1)

    return FloatingRateIndex(curve_name, fixing_offset, period_length)


class SwapLeg(Product):
    """Swap leg: a collection of periods built from a schedule.

    Args:
        schedule: Leg schedule
        notional: Notional (or scalar), or one per schedule period
        index: Floating coupon index, ``None`` for a fixed leg
        spread: Spread on the index or fixed rate, or one per period
        pay_coupon: Whether coupons are paid
        exchange_notional: Exchange notional at start and end of each period
        accrue_notional: Accrue each period's coupon into the next notional
        strict: Reject zero-length periods instead of dropping them
        descriptor: Descriptor the leg was built from, if any
    """

    def __init__(
        self,
        schedule: Schedule,
        notional: NotionalSpec,
        index: Optional[CouponIndex] = None,
        spread: SpreadSpec = 0.0,
        pay_coupon: bool = True,
        exchange_notional: bool = False,
        accrue_notional: bool = False,
        strict: bool = False,
        descriptor: Optional["InterestRateSwapLegProductDescriptor"] = None,
    ):
        self.schedule = schedule
        self.components = build_periods(
            schedule,
            notional,
            index,
            spread,
            pay_coupon=pay_coupon,
            exchange_notional=exchange_notional,
            accrue_notional=accrue_notional,
            strict=strict,
        )
        self.descriptor = descriptor

    @classmethod
    def from_descriptor(
        cls,
        descriptor: "InterestRateSwapLegProductDescriptor",
        reference_date: date,
        strict: bool = False,
    ) -> "SwapLeg":
        """Build a leg from a swap leg descriptor.

        Dates are converted to times relative to ``reference_date``. The
        floating index, if any, is parametrized from the schedule averages.
        """
        schedule = descriptor.leg_schedule.get_schedule(reference_date)
        return cls(
            schedule,
            [ConstantNotional(n) for n in descriptor.notionals],
            construct_floating_index(descriptor.forward_curve_name, schedule),
            list(descriptor.spreads),
            pay_coupon=True,
            exchange_notional=descriptor.is_notional_exchanged,
            strict=strict,
            descriptor=descriptor,
        )

    @property
    def periods(self) -> List[Period]:
        return list(self.components)

    def value(self, evaluation_time: float, model: MarketModel) -> PathVector:
        return self.components.value(evaluation_time, model)

    def cashflows(self, model: MarketModel, evaluation_time: float = 0.0) -> pd.DataFrame:
        """Expected cashflows per period.

        Columns: fixing and payment time, period length, path-average coupon
        rate, notional, coupon cashflow (undiscounted, 0 for periods that do
        not pay their coupon) and the period's value at ``evaluation_time``.
        """
        rows = []
        for i, period in enumerate(self.components):
            rate = period.coupon.value(period.fixing_time, model)
            notional = period.notional.value(period.period_start, model)
            coupon = 0.0
            if period.pay_coupon:
                coupon = (notional * rate * period.period_length).average()
            rows.append(
                {
                    "period": i,
                    "fixing_time": period.fixing_time,
                    "payment_time": period.payment_time,
                    "period_length": period.period_length,
                    "rate": rate.average(),
                    "notional": notional.average(),
                    "coupon": coupon,
                    "value": period.value(evaluation_time, model).average(),
                }
            )
        return pd.DataFrame(
            rows,
            columns=[
                "period",
                "fixing_time",
                "payment_time",
                "period_length",
                "rate",
                "notional",
                "coupon",
                "value",
            ],
        )

    def __repr__(self) -> str:
        return f"SwapLeg({len(self.components)} periods)"
