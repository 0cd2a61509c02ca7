"""Reduction of path values to a Monte Carlo price."""

from dataclasses import dataclass

from ficcmc.models import MarketModel

from .base import Product


@dataclass
class ValuationResult:
    """Monte Carlo estimate of a product's value.

    Attributes:
        price: Path average of the product value
        std_error: Standard error of the path average
        num_paths: Number of paths the estimate is based on
        evaluation_time: Time the value refers to
    """

    price: float
    std_error: float
    num_paths: int
    evaluation_time: float = 0.0


def valuate(product: Product, model: MarketModel, evaluation_time: float = 0.0) -> ValuationResult:
    """Value ``product`` and reduce the path values to a price.

    Errors raised by the model propagate unchanged.

    Examples:
        >>> result = valuate(leg, model)
        >>> print(f"{result.price:.4f} +/- {result.std_error:.4f}")
    """
    values = product.value(evaluation_time, model)
    return ValuationResult(
        price=values.average(),
        std_error=values.standard_error(),
        num_paths=values.num_paths,
        evaluation_time=evaluation_time,
    )
