# src/ged_costs/edit_costs/base.py
import math
from abc import ABC, abstractmethod
from dataclasses import astuple, dataclass, fields
from typing import Dict, List, Optional, Sequence

from ..labels import Label, decode_labels, encode_label
from ..median import GeometricMedianSolver


@dataclass(frozen=True)
class EditCostConstants:
    """Cost constants of an edit-cost model, fixed at construction."""
    node_ins_cost: float = 1.0
    node_del_cost: float = 1.0
    node_rel_cost: float = 1.0
    edge_ins_cost: float = 1.0
    edge_del_cost: float = 1.0
    edge_rel_cost: float = 1.0

    def __post_init__(self):
        for f in fields(self):
            value = float(getattr(self, f.name))
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{f.name} must be finite and non-negative, got {value}")
            object.__setattr__(self, f.name, value)

    def as_list(self) -> List[float]:
        return list(astuple(self))


class EditCosts(ABC):
    """Interface between an edit-cost model and a graph edit distance engine.

    The engine only depends on the operations declared here: six scalar cost
    queries, called arbitrarily often during the search, and two median
    queries, called when a consensus graph is synthesized. Implementations are
    read-only after construction and may be shared across threads.
    """

    # Positional order used by from_constants()
    constant_names: Sequence[str] = (
        "node_ins_cost",
        "node_del_cost",
        "node_rel_cost",
        "edge_ins_cost",
        "edge_del_cost",
        "edge_rel_cost",
    )

    def __init__(
        self,
        constants: EditCostConstants,
        median_solver: Optional[GeometricMedianSolver] = None,
    ):
        self._constants = constants
        self._median_solver = median_solver or GeometricMedianSolver()

    @classmethod
    def from_constants(cls, constants: Sequence[float], **kwargs) -> "EditCosts":
        """Build a model from a positional list of cost constants."""
        if len(constants) > len(cls.constant_names):
            raise ValueError(
                f"{cls.__name__} takes at most {len(cls.constant_names)} "
                f"constants, got {len(constants)}"
            )
        named = dict(zip(cls.constant_names, constants))
        return cls(**named, **kwargs)

    @property
    def constants(self) -> EditCostConstants:
        return self._constants

    @property
    def median_solver(self) -> GeometricMedianSolver:
        return self._median_solver

    # ========== Node operations ==========

    @abstractmethod
    def node_ins_cost(self, label: Label) -> float:
        pass

    @abstractmethod
    def node_del_cost(self, label: Label) -> float:
        pass

    @abstractmethod
    def node_rel_cost(self, label_a: Label, label_b: Label) -> float:
        pass

    def median_node_label(self, labels: Sequence[Label]) -> Dict[str, str]:
        """Representative label for a collection of node labels."""
        raise NotImplementedError(
            f"{type(self).__name__} does not support median node labels"
        )

    # ========== Edge operations ==========

    @abstractmethod
    def edge_ins_cost(self, label: Label) -> float:
        pass

    @abstractmethod
    def edge_del_cost(self, label: Label) -> float:
        pass

    @abstractmethod
    def edge_rel_cost(self, label_a: Label, label_b: Label) -> float:
        pass

    def median_edge_label(self, labels: Sequence[Label]) -> Dict[str, str]:
        """Representative label for a collection of edge labels."""
        raise NotImplementedError(
            f"{type(self).__name__} does not support median edge labels"
        )

    # ========== Helpers ==========

    def _median_label(
        self,
        labels: Sequence[Label],
        keys: Optional[Sequence[str]] = None,
    ) -> Dict[str, str]:
        """Geometric median of ``labels`` over ``keys``, encoded as a label."""
        if len(labels) == 0:
            return {}
        vectors = decode_labels(labels, keys)
        return encode_label(self._median_solver(vectors))

    def __repr__(self) -> str:
        params = ", ".join(
            f"{name}={value:g}"
            for name, value in zip(self.constant_names, self._constants.as_list())
        )
        return f"{type(self).__name__}({params})"
