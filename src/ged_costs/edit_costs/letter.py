# src/ged_costs/edit_costs/letter.py
"""Edit costs for the IAM Letter graphs.

Nodes carry Euclidean coordinates ``x`` and ``y``; edges are unattributed.
The constants generalize the costs Riesen & Bunke suggest for the Letter
datasets, with node/edge insertion, deletion and node relabeling set
separately.
"""

import logging
from typing import Dict, Optional, Sequence

from ..labels import Label, euclidean_distance
from ..median import GeometricMedianSolver
from .base import EditCostConstants, EditCosts

logger = logging.getLogger(__name__)

COORDINATE_KEYS = ("x", "y")

# (node_ins_del_cost, edge_ins_del_cost, alpha) per distortion level
LETTER_DISTORTIONS: Dict[str, tuple] = {
    "high": (0.9, 1.7, 0.75),
    "medium": (0.7, 1.9, 0.75),
    "low": (0.3, 0.1, 0.25),
}


class Letter2Costs(EditCosts):
    """Edit costs for 2-D point-labeled graphs with unattributed edges."""

    constant_names = (
        "node_ins_cost",
        "node_del_cost",
        "node_rel_cost",
        "edge_ins_cost",
        "edge_del_cost",
    )

    def __init__(
        self,
        node_ins_cost: float = 0.675,
        node_del_cost: float = 0.675,
        node_rel_cost: float = 0.75,
        edge_ins_cost: float = 0.425,
        edge_del_cost: float = 0.425,
        median_solver: Optional[GeometricMedianSolver] = None,
    ):
        """Initialize Letter edit costs.

        The defaults are the costs suggested for Letter high. Use
        ``for_distortion`` for the other distortion levels.
        """
        constants = EditCostConstants(
            node_ins_cost=node_ins_cost,
            node_del_cost=node_del_cost,
            node_rel_cost=node_rel_cost,
            edge_ins_cost=edge_ins_cost,
            edge_del_cost=edge_del_cost,
            edge_rel_cost=0.0,
        )
        super().__init__(constants, median_solver)

    @classmethod
    def for_distortion(
        cls,
        level: str,
        median_solver: Optional[GeometricMedianSolver] = None,
    ) -> "Letter2Costs":
        """Costs for Letter low, medium or high.

        Node operations are weighted by ``alpha`` and edge operations by
        ``1 - alpha``; the node relabel cost is ``alpha`` itself.
        """
        if level not in LETTER_DISTORTIONS:
            raise ValueError(
                f"Unknown distortion level: {level}. "
                f"Available: {list(LETTER_DISTORTIONS.keys())}"
            )
        node_ins_del, edge_ins_del, alpha = LETTER_DISTORTIONS[level]
        logger.debug(f"Letter {level}: alpha={alpha}, node={node_ins_del}, edge={edge_ins_del}")
        return cls(
            node_ins_cost=alpha * node_ins_del,
            node_del_cost=alpha * node_ins_del,
            node_rel_cost=alpha,
            edge_ins_cost=(1 - alpha) * edge_ins_del,
            edge_del_cost=(1 - alpha) * edge_ins_del,
            median_solver=median_solver,
        )

    def node_ins_cost(self, label: Label) -> float:
        return self._constants.node_ins_cost

    def node_del_cost(self, label: Label) -> float:
        return self._constants.node_del_cost

    def node_rel_cost(self, label_a: Label, label_b: Label) -> float:
        distance = euclidean_distance(label_a, label_b, COORDINATE_KEYS)
        return self._constants.node_rel_cost * distance

    def median_node_label(self, labels: Sequence[Label]) -> Dict[str, str]:
        """Geometric median of the node coordinates; other keys are dropped."""
        return self._median_label(labels, COORDINATE_KEYS)

    def edge_ins_cost(self, label: Label) -> float:
        return self._constants.edge_ins_cost

    def edge_del_cost(self, label: Label) -> float:
        return self._constants.edge_del_cost

    def edge_rel_cost(self, label_a: Label, label_b: Label) -> float:
        return 0.0
