# src/ged_costs/median/__init__.py
from .base import BaseMedianSolver, MedianResult
from .weiszfeld import GeometricMedianSolver, DEFAULT_EPSILON, DEFAULT_MAX_ITER

__all__ = [
    "BaseMedianSolver",
    "MedianResult",
    "GeometricMedianSolver",
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_ITER",
]
