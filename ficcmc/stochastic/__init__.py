"""Stochastic building blocks: per-path random variables."""

from .path_vector import PathVector

__all__ = ["PathVector"]
