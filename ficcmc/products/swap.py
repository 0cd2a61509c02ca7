"""Interest rate swap made of a receiver and a payer leg."""

from datetime import date
from typing import TYPE_CHECKING, Optional

from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector

from .base import Product
from .swap_leg import SwapLeg

if TYPE_CHECKING:
    from ficcmc.descriptors.types import InterestRateSwapProductDescriptor


class Swap(Product):
    """Swap valued as receiver leg minus payer leg."""

    def __init__(
        self,
        receiver_leg: SwapLeg,
        payer_leg: SwapLeg,
        descriptor: Optional["InterestRateSwapProductDescriptor"] = None,
    ):
        self.receiver_leg = receiver_leg
        self.payer_leg = payer_leg
        self.descriptor = descriptor

    @classmethod
    def from_descriptor(
        cls,
        descriptor: "InterestRateSwapProductDescriptor",
        reference_date: date,
        strict: bool = False,
    ) -> "Swap":
        return cls(
            SwapLeg.from_descriptor(descriptor.leg_receiver, reference_date, strict=strict),
            SwapLeg.from_descriptor(descriptor.leg_payer, reference_date, strict=strict),
            descriptor=descriptor,
        )

    def value(self, evaluation_time: float, model: MarketModel) -> PathVector:
        receiver = self.receiver_leg.value(evaluation_time, model)
        payer = self.payer_leg.value(evaluation_time, model)
        return (receiver - payer).at_time(evaluation_time)
