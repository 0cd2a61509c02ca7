"""Configuration for Monte Carlo valuation."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ValuationConfig:
    """Simulation and construction settings.

    Attributes:
        num_paths: Number of simulated paths. Default 10000.
        random_seed: Optional seed for reproducible simulations. Default None.
        antithetic: Pair every draw with its negative. Requires an even
            number of paths.
        strict_schedule: Reject zero-length schedule periods instead of
            dropping them.
    """

    num_paths: int = 10_000
    random_seed: Optional[int] = None
    antithetic: bool = False
    strict_schedule: bool = False

    def __post_init__(self):
        if self.num_paths < 1:
            raise ValueError("num_paths must be at least 1")
        if self.antithetic and self.num_paths % 2 != 0:
            raise ValueError(
                f"Antithetic sampling requires an even number of paths, got {self.num_paths}"
            )


DEFAULT_CONFIG = ValuationConfig()
