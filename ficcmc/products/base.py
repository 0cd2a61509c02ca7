"""Base class for products valued against a market model."""

from abc import ABC, abstractmethod

from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector


class Product(ABC):
    """A component that can be valued path by path.

    ``value`` returns the product's value at ``evaluation_time`` on every
    path, expressed in units of currency at that time. It never mutates the
    product, so a product tree can be shared by concurrent valuations.
    """

    @abstractmethod
    def value(self, evaluation_time: float, model: MarketModel) -> PathVector:
        """Value of the product at ``evaluation_time`` on each path."""
        pass

    def price(self, model: MarketModel, evaluation_time: float = 0.0) -> float:
        """Monte Carlo price: path average of :meth:`value`."""
        return self.value(evaluation_time, model).average()
