# src/ged_costs/__init__.py
"""Edit-cost models and median labels for graph edit distance."""

__version__ = "0.1.0"

from .edit_costs import (
    EDIT_COSTS,
    EditCostConstants,
    EditCosts,
    Letter2Costs,
    NonSymbolicCosts,
    get_edit_costs,
)
from .labels import AttributeKeyError, EditCostError, NumericParseError
from .median import GeometricMedianSolver, MedianResult
from .config import EditCostsConfig, MedianConfig

__all__ = [
    "EDIT_COSTS",
    "EditCostConstants",
    "EditCosts",
    "Letter2Costs",
    "NonSymbolicCosts",
    "get_edit_costs",
    "AttributeKeyError",
    "EditCostError",
    "NumericParseError",
    "GeometricMedianSolver",
    "MedianResult",
    "EditCostsConfig",
    "MedianConfig",
]
