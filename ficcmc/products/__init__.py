"""
Products composed from elementary cashflow components.

A product is a tree of coupon indices, notionals and periods collected into
product collections. Building the tree is the pricing algorithm; valuing it
walks the tree against a market model.
"""

from .base import Product
from .collection import ProductCollection
from .indices import (
    CouponIndex,
    FixedCoupon,
    FloatingRateIndex,
    LinearCombinationIndex,
)
from .notionals import AccruingNotional, ConstantNotional, Notional
from .options import DigitalOption, EuropeanOption
from .period import Period, PeriodArena
from .swap import Swap
from .swap_leg import SwapLeg, build_periods, construct_floating_index
from .valuation import ValuationResult, valuate

__all__ = [
    # Base
    'Product',
    'ProductCollection',

    # Coupon indices
    'CouponIndex',
    'FixedCoupon',
    'FloatingRateIndex',
    'LinearCombinationIndex',

    # Notionals
    'Notional',
    'ConstantNotional',
    'AccruingNotional',

    # Periods and legs
    'Period',
    'PeriodArena',
    'SwapLeg',
    'Swap',
    'build_periods',
    'construct_floating_index',

    # Single-asset options
    'EuropeanOption',
    'DigitalOption',

    # Valuation
    'ValuationResult',
    'valuate',
]
