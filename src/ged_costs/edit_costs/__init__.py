# src/ged_costs/edit_costs/__init__.py
import logging
from typing import Dict, Type

from .base import EditCosts, EditCostConstants
from .letter import Letter2Costs, LETTER_DISTORTIONS
from .non_symbolic import NonSymbolicCosts

logger = logging.getLogger(__name__)

EDIT_COSTS: Dict[str, Type[EditCosts]] = {
    "letter2": Letter2Costs,
    "non_symbolic": NonSymbolicCosts,
}

def get_edit_costs(name: str, **kwargs) -> EditCosts:
    """Factory function for creating edit-cost models."""
    if name not in EDIT_COSTS:
        raise ValueError(f"Unknown edit costs: {name}. Available: {list(EDIT_COSTS.keys())}")
    costs = EDIT_COSTS[name](**kwargs)
    logger.debug(f"Created {costs!r}")
    return costs

__all__ = [
    "EditCosts",
    "EditCostConstants",
    "Letter2Costs",
    "LETTER_DISTORTIONS",
    "NonSymbolicCosts",
    "EDIT_COSTS",
    "get_edit_costs",
]
