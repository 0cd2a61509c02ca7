"""Notionals: the amount a period's coupon is paid on.

``AccruingNotional`` is the only component allowed to look at another
period. It holds an index into an append-only :class:`PeriodArena`, never
the period object itself, and only reads from it.
"""

import threading
import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from ficcmc.errors import ArgumentError, UnsupportedVariantError
from ficcmc.models import MarketModel
from ficcmc.stochastic import PathVector

if TYPE_CHECKING:
    from .period import Period, PeriodArena


class Notional(ABC):
    """Notional amount of a period."""

    @abstractmethod
    def value(self, time: float, model: MarketModel) -> PathVector:
        """Notional on each path, observed at ``time``."""
        pass


@dataclass(frozen=True)
class ConstantNotional(Notional):
    """Fixed amount, identical on every path."""

    amount: float

    def value(self, time: float, model: MarketModel) -> PathVector:
        return PathVector.constant(self.amount, model.num_paths, time)


def as_notional(notional: Union[Notional, float, int]) -> Notional:
    """Wrap a scalar into a :class:`ConstantNotional`; pass notionals through."""
    if isinstance(notional, NOTIONAL_TYPES):
        return notional
    if isinstance(notional, (int, float)) and not isinstance(notional, bool):
        return ConstantNotional(float(notional))
    raise UnsupportedVariantError(
        f"Unsupported notional type {type(notional).__name__}. "
        f"Supported: ConstantNotional, AccruingNotional or a number"
    )


class AccruingNotional(Notional):
    """Notional of the previous period grown by that period's coupon.

    For a previous period with notional ``N``, rate ``c`` and length ``dt``
    the value is ``N * (1 + c * dt)``. The coupon accrues into the notional
    whether or not the previous period pays it out. Accrued amounts are
    cached per model, which is treated as an immutable snapshot.

    Args:
        previous_notional: Notional of the previous period (or a scalar)
        arena: Arena holding the previous period
        period_index: Index of the previous period in ``arena``

    Raises:
        ArgumentError: If ``period_index`` does not refer to an existing period
    """

    __slots__ = ("_previous_notional", "_arena", "_period_index", "_accrued", "_lock")

    def __init__(
        self,
        previous_notional: Union[Notional, float],
        arena: "PeriodArena",
        period_index: int,
    ):
        if not 0 <= period_index < len(arena):
            raise ArgumentError(
                f"Accruing notional refers to period {period_index}, "
                f"but only {len(arena)} periods have been constructed"
            )
        self._previous_notional = as_notional(previous_notional)
        self._arena = arena
        self._period_index = period_index
        self._accrued = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    @property
    def previous_notional(self) -> Notional:
        return self._previous_notional

    @property
    def period_index(self) -> int:
        return self._period_index

    @property
    def previous_period(self) -> "Period":
        return self._arena[self._period_index]

    def value(self, time: float, model: MarketModel) -> PathVector:
        # Walk back to the nearest notional with a known amount, then accrue forward.
        pending = []
        node: Notional = self
        amount = None
        while isinstance(node, AccruingNotional):
            amount = node._cached(model)
            if amount is not None:
                break
            pending.append(node)
            node = node._previous_notional

        if amount is None:
            amount = node.value(pending[-1].previous_period.period_start, model)
        for accruing in reversed(pending):
            amount = amount * (accruing.previous_period.coupon_amount(model) + 1.0)
            accruing._store(model, amount)
        return amount

    def _cached(self, model: MarketModel) -> Optional[PathVector]:
        with self._lock:
            return self._accrued.get(model)

    def _store(self, model: MarketModel, amount: PathVector) -> None:
        with self._lock:
            self._accrued[model] = amount

    def __repr__(self) -> str:
        return (
            f"AccruingNotional(previous_notional={self._previous_notional!r}, "
            f"period_index={self._period_index})"
        )


NOTIONAL_TYPES = (ConstantNotional, AccruingNotional)
