"""Aggregation of products into a single valuable component."""

from typing import Iterable, Iterator, Tuple

from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector

from .base import Product


class ProductCollection(Product):
    """Ordered, immutable collection whose value is the sum of its members.

    Members may themselves be collections. The order does not change the
    value beyond floating point rounding; it is kept for deterministic
    iteration.
    """

    __slots__ = ("_products",)

    def __init__(self, products: Iterable[Product] = ()):
        self._products: Tuple[Product, ...] = tuple(products)

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __getitem__(self, index: int) -> Product:
        return self._products[index]

    def value(self, evaluation_time: float, model: MarketModel) -> PathVector:
        total = PathVector.zeros(model.num_paths, evaluation_time)
        for product in self._products:
            total = total + product.value(evaluation_time, model)
        return total.at_time(evaluation_time)

    def __repr__(self) -> str:
        return f"ProductCollection({len(self._products)} products)"
