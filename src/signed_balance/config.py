"""BalanceConfig: validated dataclass configuration for balance analyses."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class BalanceConfig:
    seed: int = 42
    sample_graph: str = "complex_network_15"
    # Cycle enumeration is exponential; None disables the node ceiling.
    max_cycle_nodes: int | None = 40
    # Cycles listed in a report summary (the count is always exact)
    report_cycle_limit: int = 20
    # Random cross-check
    crosscheck_graphs: int = 50
    crosscheck_min_nodes: int = 4
    crosscheck_max_nodes: int = 10
    # Complete draws are capped separately: K_n has factorially many cycles.
    crosscheck_complete_max_nodes: int = 7
    crosscheck_edge_prob: float = 0.4
    crosscheck_negative_prob: float = 0.3
    # Artifacts
    artifacts_dir: str = "artifacts"
    experiment_id: str | None = None

    def __post_init__(self) -> None:
        if self.max_cycle_nodes is not None and self.max_cycle_nodes < 3:
            raise ValueError("max_cycle_nodes must be >= 3 or None")
        if self.report_cycle_limit < 0:
            raise ValueError("report_cycle_limit must be >= 0")
        if self.crosscheck_graphs < 1:
            raise ValueError("crosscheck_graphs must be >= 1")
        if self.crosscheck_min_nodes < 3:
            raise ValueError("crosscheck_min_nodes must be >= 3")
        if self.crosscheck_max_nodes < self.crosscheck_min_nodes:
            raise ValueError("crosscheck_max_nodes must be >= crosscheck_min_nodes")
        if (
            self.max_cycle_nodes is not None
            and self.crosscheck_max_nodes > self.max_cycle_nodes
        ):
            raise ValueError("crosscheck_max_nodes must be <= max_cycle_nodes")
        if self.crosscheck_complete_max_nodes < 3:
            raise ValueError("crosscheck_complete_max_nodes must be >= 3")
        if not (0.0 <= self.crosscheck_edge_prob <= 1.0):
            raise ValueError("crosscheck_edge_prob must be between 0.0 and 1.0")
        if not (0.0 <= self.crosscheck_negative_prob <= 1.0):
            raise ValueError("crosscheck_negative_prob must be between 0.0 and 1.0")

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> BalanceConfig:
        unknown = sorted(set(values) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**values)

    @classmethod
    def from_json(cls, path: str | Path) -> BalanceConfig:
        with Path(path).open("r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
