# src/ged_costs/edit_costs/non_symbolic.py
from typing import Dict, Optional, Sequence

from ..labels import Label, euclidean_distance
from ..median import GeometricMedianSolver
from .base import EditCostConstants, EditCosts


class NonSymbolicCosts(EditCosts):
    """Edit costs for graphs whose labels are all non-symbolic.

    Every node attribute enters the node relabel cost and every edge
    attribute the edge relabel cost, as the Euclidean distance between the
    attribute vectors scaled by the relabel constant. For datasets without
    node or edge attributes set the matching relabel constant to 0.
    """

    def __init__(
        self,
        node_ins_cost: float = 1.0,
        node_del_cost: float = 1.0,
        node_rel_cost: float = 1.0,
        edge_ins_cost: float = 1.0,
        edge_del_cost: float = 1.0,
        edge_rel_cost: float = 1.0,
        median_solver: Optional[GeometricMedianSolver] = None,
    ):
        constants = EditCostConstants(
            node_ins_cost=node_ins_cost,
            node_del_cost=node_del_cost,
            node_rel_cost=node_rel_cost,
            edge_ins_cost=edge_ins_cost,
            edge_del_cost=edge_del_cost,
            edge_rel_cost=edge_rel_cost,
        )
        super().__init__(constants, median_solver)

    def node_ins_cost(self, label: Label) -> float:
        return self._constants.node_ins_cost

    def node_del_cost(self, label: Label) -> float:
        return self._constants.node_del_cost

    def node_rel_cost(self, label_a: Label, label_b: Label) -> float:
        # 0 disables the comparison; labels are not even looked at
        if self._constants.node_rel_cost == 0:
            return 0.0
        return self._constants.node_rel_cost * euclidean_distance(label_a, label_b)

    def median_node_label(self, labels: Sequence[Label]) -> Dict[str, str]:
        return self._median_label(labels)

    def edge_ins_cost(self, label: Label) -> float:
        return self._constants.edge_ins_cost

    def edge_del_cost(self, label: Label) -> float:
        return self._constants.edge_del_cost

    def edge_rel_cost(self, label_a: Label, label_b: Label) -> float:
        if self._constants.edge_rel_cost == 0:
            return 0.0
        return self._constants.edge_rel_cost * euclidean_distance(label_a, label_b)

    def median_edge_label(self, labels: Sequence[Label]) -> Dict[str, str]:
        return self._median_label(labels)
