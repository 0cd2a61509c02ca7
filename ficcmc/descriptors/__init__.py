"""Model-independent product descriptors and the factories building products from them."""

from .factory import InterestRateMonteCarloProductFactory, SingleAssetMonteCarloProductFactory
from .types import (
    InterestRateProductDescriptor,
    InterestRateSwapLegProductDescriptor,
    InterestRateSwapProductDescriptor,
    ProductDescriptor,
    SingleAssetDigitalOptionProductDescriptor,
    SingleAssetEuropeanOptionProductDescriptor,
    SingleAssetProductDescriptor,
)
