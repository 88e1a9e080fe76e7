# src/ged_costs/config.py
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, Optional
import yaml

from .edit_costs import EditCosts, Letter2Costs, get_edit_costs
from .median import DEFAULT_EPSILON, DEFAULT_MAX_ITER, GeometricMedianSolver

@dataclass
class MedianConfig:
    epsilon: float = DEFAULT_EPSILON
    max_iter: int = DEFAULT_MAX_ITER

    def build(self) -> GeometricMedianSolver:
        return GeometricMedianSolver(epsilon=self.epsilon, max_iter=self.max_iter)

@dataclass
class EditCostsConfig:
    name: str = "non_symbolic"
    constants: Dict[str, float] = field(default_factory=dict)
    # Letter preset ("low", "medium", "high"); only valid with name "letter2"
    distortion: Optional[str] = None
    median: MedianConfig = field(default_factory=MedianConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "EditCostsConfig":
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            data = {}

        # Allow the whole config to sit under an "edit_costs" section
        if isinstance(data.get("edit_costs"), dict):
            data = data["edit_costs"]

        median_data = data.get("median", {})
        if isinstance(median_data, dict):
            data["median"] = MedianConfig(**median_data)
        if data.get("constants") is None:
            data["constants"] = {}

        return cls(**data)

    def build(self) -> EditCosts:
        solver = self.median.build()
        if self.distortion is not None:
            if self.name != "letter2":
                raise ValueError(
                    f"distortion is only supported for letter2, not {self.name}"
                )
            if self.constants:
                raise ValueError("distortion and constants are mutually exclusive")
            return Letter2Costs.for_distortion(self.distortion, median_solver=solver)
        return get_edit_costs(self.name, median_solver=solver, **self.constants)

    def save(self, path: Path) -> None:
        data = asdict(self)
        data["constants"] = {k: float(v) for k, v in self.constants.items()}
        with open(path, "w") as f:
            yaml.safe_dump(data, f)
