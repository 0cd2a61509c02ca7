"""
Product factories turning descriptors into Monte Carlo products.

Dates in descriptors are converted to model times as ACT/365F year
fractions from the factory's reference date.
"""

import logging
from datetime import date

from ficcmc.config import DEFAULT_CONFIG, ValuationConfig
from ficcmc.conventions.daycount import ACT_365F
from ficcmc.errors import UnsupportedVariantError
from ficcmc.products import DigitalOption, EuropeanOption, Product, Swap, SwapLeg

from .types import (
    InterestRateSwapLegProductDescriptor,
    InterestRateSwapProductDescriptor,
    ProductDescriptor,
    SingleAssetDigitalOptionProductDescriptor,
    SingleAssetEuropeanOptionProductDescriptor,
)

logger = logging.getLogger(__name__)


def _unsupported(descriptor) -> UnsupportedVariantError:
    name = getattr(descriptor, "name", type(descriptor).__name__)
    return UnsupportedVariantError(f"Unsupported product type {name}")


class InterestRateMonteCarloProductFactory:
    """Builds swap legs and swaps from interest rate descriptors.

    With ``config.strict_schedule`` set, zero-length schedule periods are
    rejected instead of dropped.
    """

    def __init__(self, reference_date: date, config: ValuationConfig = DEFAULT_CONFIG):
        self.reference_date = reference_date
        self.config = config

    def get_product_from_descriptor(self, descriptor: ProductDescriptor) -> Product:
        logger.debug("Building %s as of %s", getattr(descriptor, "name", descriptor), self.reference_date)

        if isinstance(descriptor, InterestRateSwapLegProductDescriptor):
            return SwapLeg.from_descriptor(descriptor, self.reference_date, strict=self.config.strict_schedule)
        if isinstance(descriptor, InterestRateSwapProductDescriptor):
            return Swap.from_descriptor(descriptor, self.reference_date, strict=self.config.strict_schedule)
        raise _unsupported(descriptor)


class SingleAssetMonteCarloProductFactory:
    """Builds single-asset options from option descriptors."""

    def __init__(self, reference_date: date):
        self.reference_date = reference_date

    def get_product_from_descriptor(self, descriptor: ProductDescriptor) -> Product:
        logger.debug("Building %s as of %s", getattr(descriptor, "name", descriptor), self.reference_date)

        if isinstance(descriptor, SingleAssetEuropeanOptionProductDescriptor):
            option_type = EuropeanOption
        elif isinstance(descriptor, SingleAssetDigitalOptionProductDescriptor):
            option_type = DigitalOption
        else:
            raise _unsupported(descriptor)

        return option_type(
            maturity=ACT_365F.year_fraction(self.reference_date, descriptor.maturity),
            strike=descriptor.strike,
            underlying_name=descriptor.underlying_name,
        )
