"""Interfaces the product components require from a market model."""

from typing import Optional, Protocol, runtime_checkable

from ficcmc.stochastic import PathVector


@runtime_checkable
class MarketModel(Protocol):
    """Protocol for simulated interest rate models.

    All quantities are returned as path vectors under the model's canonical
    measure, with the numeraire as the unit of account. Implementations raise
    :class:`ficcmc.errors.ComputationError` for requests they cannot answer
    (times outside the simulated horizon, unknown curves).
    """

    @property
    def num_paths(self) -> int:
        """Number of simulated paths, fixed for the model's lifetime."""
        ...

    def forward_rate(
        self, curve_id: Optional[str], fixing_time: float, period_length: float
    ) -> PathVector:
        """Simply compounded forward rate over [fixing_time, fixing_time + period_length]."""
        ...

    def numeraire(self, time: float) -> PathVector:
        """Numeraire value at ``time``."""
        ...

    def discount_factor(self, time: float) -> PathVector:
        """Realised discount factor ``N(0) / N(time)`` to ``time``."""
        ...


@runtime_checkable
class AssetModel(MarketModel, Protocol):
    """Protocol for single-asset models."""

    def asset_value(self, time: float) -> PathVector:
        """Simulated value of the underlying at ``time``."""
        ...
