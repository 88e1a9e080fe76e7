# src/ged_costs/median/base.py
import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Mapping, Sequence

import numpy as np

from ..labels import AttributeKeyError, AttributeVector, NumericParseError


@dataclass
class MedianResult:
    """Standardized output from all median solvers."""
    vector: np.ndarray
    keys: List[str]
    iterations: int = 0
    converged: bool = True
    all_equal: bool = False  # Every input coincided with the estimate
    metadata: dict = None

    def __post_init__(self):
        self.metadata = self.metadata or {}

    def as_attributes(self) -> AttributeVector:
        return {key: float(value) for key, value in zip(self.keys, self.vector)}


class BaseMedianSolver(ABC):
    """Abstract base class for label aggregation methods."""

    @abstractmethod
    def aggregate(self, points: np.ndarray, keys: List[str]) -> MedianResult:
        """
        Aggregate input points.

        Args:
            points: Shape (n, d) array of n points in d dimensions
            keys: Attribute name of each of the d columns

        Returns:
            MedianResult containing the representative point and diagnostics
        """
        pass

    def solve(self, vectors: Sequence[Mapping[str, float]]) -> MedianResult:
        points, keys = self._validate_input(vectors)
        return self.aggregate(points, keys)

    def __call__(self, vectors: Sequence[Mapping[str, float]]) -> AttributeVector:
        return self.solve(vectors).as_attributes()

    def _validate_input(self, vectors):
        if len(vectors) == 0:
            raise ValueError("Cannot aggregate an empty collection of vectors")
        keys = list(vectors[0].keys())
        rows = []
        for vector in vectors:
            row = []
            for key in keys:
                try:
                    value = vector[key]
                except KeyError:
                    raise AttributeKeyError(key, vector) from None
                # Text must be decoded by the caller; only real numbers pass
                if (
                    isinstance(value, bool)
                    or not isinstance(value, numbers.Real)
                    or not math.isfinite(value)
                ):
                    raise NumericParseError(key, value)
                row.append(value)
            rows.append(row)
        points = np.asarray(rows, dtype=np.float64).reshape(len(rows), len(keys))
        return points, keys
