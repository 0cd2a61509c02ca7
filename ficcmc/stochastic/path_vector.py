"""Per-path random variables used throughout Monte Carlo valuation.

A :class:`PathVector` holds one value per simulated path together with the
time at which the quantity is observed. All arithmetic is pointwise. The
result of a binary operation carries the later of the two observation times;
moving a quantity to a different time (discounting, numeraire rebasing) is
the caller's job and ends with an explicit :meth:`PathVector.at_time`.
"""

import math
from typing import Callable, Union

import numpy as np

from ficcmc.errors import ArgumentError

Operand = Union["PathVector", float, int]


class PathVector:
    """Immutable vector of path values observed at a fixed time."""

    __slots__ = ("_time", "_values")

    def __init__(self, time: float, values):
        array = np.array(values, dtype=float, copy=True, ndmin=1)
        if array.ndim != 1:
            raise ArgumentError(f"Path values must be one-dimensional, got shape {array.shape}")
        array.setflags(write=False)
        self._time = float(time)
        self._values = array

    @classmethod
    def zeros(cls, num_paths: int, time: float = 0.0) -> "PathVector":
        """All-zero vector with ``num_paths`` entries."""
        return cls(time, np.zeros(num_paths))

    @classmethod
    def constant(cls, value: float, num_paths: int, time: float = 0.0) -> "PathVector":
        """Deterministic value broadcast to ``num_paths`` entries."""
        return cls(time, np.full(num_paths, float(value)))

    @property
    def time(self) -> float:
        """Observation time of the quantity."""
        return self._time

    @property
    def values(self) -> np.ndarray:
        """Read-only array of path values."""
        return self._values

    @property
    def num_paths(self) -> int:
        return self._values.shape[0]

    def __len__(self) -> int:
        return self.num_paths

    def at_time(self, time: float) -> "PathVector":
        """Same values tagged with a different observation time."""
        return PathVector(time, self._values)

    def _combine(self, other: Operand, op: Callable, reflected: bool = False) -> "PathVector":
        if isinstance(other, PathVector):
            n, m = self.num_paths, other.num_paths
            if n != m and n != 1 and m != 1:
                raise ArgumentError(f"Path count mismatch: {n} vs {m}")
            time = max(self._time, other._time)
            other_values = other._values
        elif isinstance(other, (int, float, np.floating, np.integer)):
            time = self._time
            other_values = float(other)
        else:
            return NotImplemented

        if reflected:
            return PathVector(time, op(other_values, self._values))
        return PathVector(time, op(self._values, other_values))

    def __add__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.add)

    def __radd__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.add, reflected=True)

    def __sub__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.subtract)

    def __rsub__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.subtract, reflected=True)

    def __mul__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.multiply)

    def __rmul__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.multiply, reflected=True)

    def __truediv__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.divide)

    def __rtruediv__(self, other: Operand) -> "PathVector":
        return self._combine(other, np.divide, reflected=True)

    def __neg__(self) -> "PathVector":
        return PathVector(self._time, -self._values)

    def floor(self, floor: float) -> "PathVector":
        """Pointwise ``max(value, floor)``."""
        return PathVector(self._time, np.maximum(self._values, floor))

    def apply(self, function: Callable[[np.ndarray], np.ndarray]) -> "PathVector":
        """Apply a vectorised function to the path values."""
        return PathVector(self._time, function(self._values))

    def average(self) -> float:
        """Path average, the Monte Carlo estimate of the expectation."""
        return float(np.mean(self._values))

    def variance(self) -> float:
        return float(np.var(self._values))

    def standard_error(self) -> float:
        """Standard error of :meth:`average`."""
        return math.sqrt(self.variance() / self.num_paths)

    def __repr__(self) -> str:
        return (
            f"PathVector(time={self._time}, num_paths={self.num_paths}, "
            f"average={self.average():.6g})"
        )
