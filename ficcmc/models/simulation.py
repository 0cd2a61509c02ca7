"""Shared machinery for simulated market models.

Simulation is lazy: paths are generated on the first query. Derived
quantities are memoized per (quantity, time) key behind a lock, so a model
can be shared by concurrent valuations and still compute each quantity at
most once.
"""

import logging
import threading
from typing import Callable, Dict, Hashable, Sequence

import numpy as np

from ficcmc.config import DEFAULT_CONFIG, ValuationConfig
from ficcmc.errors import ComputationError
from ficcmc.stochastic import PathVector

logger = logging.getLogger(__name__)


class SimulationModel:
    """Base class for models simulated on a fixed time grid."""

    def __init__(self, time_grid: Sequence[float], config: ValuationConfig = DEFAULT_CONFIG):
        grid = np.asarray(time_grid, dtype=float)
        if grid.ndim != 1 or len(grid) < 2:
            raise ValueError("Time grid needs at least 2 points")
        if grid[0] != 0.0:
            raise ValueError(f"Time grid must start at 0, got {grid[0]}")
        if np.any(np.diff(grid) <= 0):
            raise ValueError("Time grid must be strictly increasing")

        self.time_grid = grid
        self.config = config
        self._lock = threading.RLock()
        self._cache: Dict[Hashable, PathVector] = {}
        self._simulated = False

    @property
    def num_paths(self) -> int:
        return self.config.num_paths

    @property
    def horizon(self) -> float:
        return float(self.time_grid[-1])

    def time_index(self, time: float) -> int:
        """Index of the last grid time not after ``time``."""
        if time < 0 or time > self.horizon + 1e-12:
            raise ComputationError(
                f"Time {time} outside simulated horizon [0, {self.horizon}]"
            )
        index = int(np.searchsorted(self.time_grid, time + 1e-12, side="right")) - 1
        return max(index, 0)

    def _brownian_increments(self) -> np.ndarray:
        """Brownian increments of shape (steps, paths)."""
        rng = np.random.default_rng(self.config.random_seed)
        steps = len(self.time_grid) - 1
        n = self.num_paths
        if self.config.antithetic:
            half = rng.standard_normal((steps, n // 2))
            normals = np.concatenate((half, -half), axis=1)
        else:
            normals = rng.standard_normal((steps, n))
        return normals * np.sqrt(np.diff(self.time_grid))[:, None]

    def _ensure_simulated(self) -> None:
        with self._lock:
            if self._simulated:
                return
            logger.debug(
                "Simulating %s paths on %s time steps for %s",
                self.num_paths,
                len(self.time_grid) - 1,
                type(self).__name__,
            )
            self._simulate()
            self._simulated = True
            logger.debug("Simulation finished for %s", type(self).__name__)

    def _simulate(self) -> None:
        raise NotImplementedError

    def _memoized(self, key: Hashable, compute: Callable[[], PathVector]) -> PathVector:
        with self._lock:
            cached = self._cache.get(key)
            if cached is None:
                self._ensure_simulated()
                cached = compute()
                self._cache[key] = cached
            return cached
