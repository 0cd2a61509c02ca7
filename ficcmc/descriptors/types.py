"""
Product descriptors.

A descriptor is a model-independent description of a product in calendar
terms. Factories turn descriptors into products valued against a model.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ficcmc.schedule import ScheduleDescriptor


class ProductDescriptor:
    """Base class of all product descriptors."""

    name: str = "Product"


class InterestRateProductDescriptor(ProductDescriptor):
    name = "Interest rate product"


class SingleAssetProductDescriptor(ProductDescriptor):
    name = "Single asset product"


@dataclass(frozen=True)
class InterestRateSwapLegProductDescriptor(InterestRateProductDescriptor):
    """Swap leg in calendar terms.

    Attributes:
        leg_schedule: Dated schedule conventions of the leg
        forward_curve_name: Curve to project the floating rate from,
            ``None`` for a fixed leg
        notionals: One notional per schedule period
        spreads: One spread per schedule period (the fixed rate on a fixed leg)
        is_notional_exchanged: Exchange notional at start and end of each period
    """

    leg_schedule: ScheduleDescriptor
    forward_curve_name: Optional[str]
    notionals: Tuple[float, ...]
    spreads: Tuple[float, ...]
    is_notional_exchanged: bool = False

    name = "Interest Rate Swap Leg"

    def __post_init__(self):
        object.__setattr__(self, "notionals", tuple(float(n) for n in self.notionals))
        object.__setattr__(self, "spreads", tuple(float(s) for s in self.spreads))

    @classmethod
    def with_constant_terms(
        cls,
        leg_schedule: ScheduleDescriptor,
        forward_curve_name: Optional[str],
        notional: float,
        spread: float,
        is_notional_exchanged: bool = False,
    ) -> "InterestRateSwapLegProductDescriptor":
        """Descriptor with the same notional and spread in every period."""
        num_periods = len(leg_schedule.generate_periods())
        return cls(
            leg_schedule,
            forward_curve_name,
            (notional,) * num_periods,
            (spread,) * num_periods,
            is_notional_exchanged,
        )


@dataclass(frozen=True)
class InterestRateSwapProductDescriptor(InterestRateProductDescriptor):
    """Swap made of a receiver and a payer leg."""

    leg_receiver: InterestRateSwapLegProductDescriptor
    leg_payer: InterestRateSwapLegProductDescriptor

    name = "Interest Rate Swap"


@dataclass(frozen=True)
class SingleAssetEuropeanOptionProductDescriptor(SingleAssetProductDescriptor):
    underlying_name: str
    maturity: date
    strike: float

    name = "Single asset European option"


@dataclass(frozen=True)
class SingleAssetDigitalOptionProductDescriptor(SingleAssetProductDescriptor):
    underlying_name: str
    maturity: date
    strike: float

    name = "Single asset digital option"
