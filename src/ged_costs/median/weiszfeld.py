# src/ged_costs/median/weiszfeld.py
import logging
from typing import List

import numpy as np

from .base import BaseMedianSolver, MedianResult

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-4
DEFAULT_MAX_ITER = 100


class GeometricMedianSolver(BaseMedianSolver):
    """Weiszfeld's algorithm for the geometric median (1-median).

    Finds the point minimizing the sum of Euclidean distances to the input
    points, all weighted equally. The estimate starts at the arithmetic mean
    and is refined by inverse-distance weighting until the L1 change between
    two estimates drops to ``epsilon``, every point coincides with the
    estimate, or ``max_iter`` passes have run.
    """

    def __init__(
        self,
        epsilon: float = DEFAULT_EPSILON,
        max_iter: int = DEFAULT_MAX_ITER,
    ):
        """Initialize solver.

        Args:
            epsilon: Convergence threshold on the L1 step between estimates
            max_iter: Hard cap on the number of passes over the input
        """
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon}")
        if max_iter < 1:
            raise ValueError(f"max_iter must be positive, got {max_iter}")
        self.epsilon = float(epsilon)
        self.max_iter = int(max_iter)

    def aggregate(self, points: np.ndarray, keys: List[str]) -> MedianResult:
        n = points.shape[0]
        with np.errstate(over="ignore", invalid="ignore"):
            median = points.mean(axis=0)
            if not np.all(np.isfinite(median)):
                median = (points / n).sum(axis=0)
        delta = np.inf
        iterations = 0
        all_equal = False
        overflow = not np.all(np.isfinite(median))

        while not overflow and iterations < self.max_iter:
            iterations += 1
            norms = self._distances(points, median)
            if not np.all(np.isfinite(norms)):
                overflow = True
                break

            # Points sitting on the estimate would divide by zero; skip them
            active = norms != 0.0
            if not active.any():
                all_equal = True
                break
            inverse = 1.0 / norms[active]
            denominator = inverse.sum()

            with np.errstate(over="ignore", invalid="ignore"):
                numerator = (points[active] * inverse[:, None]).sum(axis=0)
                new_median = numerator / denominator
            if denominator == 0.0 or not np.all(np.isfinite(new_median)):
                overflow = True
                break
            delta = float(np.abs(new_median - median).sum())
            median = new_median
            if delta <= self.epsilon:
                break

        converged = all_equal or (not overflow and delta <= self.epsilon)
        if all_equal:
            logger.debug(
                f"All {n} points coincide with the estimate after "
                f"{iterations} pass(es)"
            )
        elif overflow:
            logger.debug(
                f"Stopped after {iterations} pass(es): values out of float range; "
                "returning last finite estimate"
            )
        elif not converged:
            logger.debug(
                f"Iteration cap of {self.max_iter} reached with "
                f"delta={delta:.3g} > epsilon={self.epsilon:g}; "
                "returning best-effort estimate"
            )

        return MedianResult(
            vector=median,
            keys=keys,
            iterations=iterations,
            converged=converged,
            all_equal=all_equal,
            metadata={"n_vectors": int(n), "delta": delta, "overflow": overflow},
        )

    @staticmethod
    def _distances(points: np.ndarray, center: np.ndarray) -> np.ndarray:
        """Row-wise Euclidean distances, scaled so squaring cannot overflow."""
        with np.errstate(over="ignore", invalid="ignore"):
            diffs = points - center
            scale = np.max(np.abs(diffs), axis=1, initial=0.0)
            safe = np.where(scale > 0.0, scale, 1.0)
            return scale * np.sqrt(np.sum((diffs / safe[:, None]) ** 2, axis=1))
