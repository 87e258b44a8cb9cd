"""Cross-checking the three balance checkers and building report summaries.

The checkers are independent; this module is where their verdicts meet.
Agreement follows the equivalence law: the cycle and super-node checkers
must always agree, and the triangle checker must join them whenever the
graph is complete (on sparser graphs it can only under-report imbalance).
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

import numpy as np

from .checkers import (
    CycleBalanceChecker,
    CycleSearchLimitError,
    SuperNodeBalanceChecker,
    TriangleBalanceChecker,
)
from .config import BalanceConfig
from .datasets.generators import planted_faction_graph, random_signed_graph
from .types import SignedGraph

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CheckerVerdicts:
    triangle: bool
    cycle: bool | None  # None when the cycle search was refused by its size guard
    super_node: bool
    complete: bool

    @property
    def agree(self) -> bool:
        if self.cycle is not None and self.cycle != self.super_node:
            return False
        if self.complete and self.triangle != self.super_node:
            return False
        return True

    @property
    def balanced(self) -> bool:
        """Verdict of the exact (super-node) checker."""
        return self.super_node

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["agree"] = self.agree
        return payload


def compare_checkers(graph: SignedGraph, max_cycle_nodes: int | None = None) -> CheckerVerdicts:
    cycle_checker = CycleBalanceChecker(max_nodes=max_cycle_nodes)
    try:
        cycle_verdict: bool | None = cycle_checker.is_balanced(graph)
    except CycleSearchLimitError as exc:
        logger.warning("Skipping cycle check: %s", exc)
        cycle_verdict = None

    verdicts = CheckerVerdicts(
        triangle=TriangleBalanceChecker().is_balanced(graph),
        cycle=cycle_verdict,
        super_node=SuperNodeBalanceChecker().is_balanced(graph),
        complete=graph.is_complete(),
    )
    if not verdicts.agree:
        logger.warning("Checkers disagree on %r: %s", graph, verdicts.to_dict())
    return verdicts


def _cycle_section(graph: SignedGraph, cfg: BalanceConfig) -> dict[str, Any]:
    checker = CycleBalanceChecker(max_nodes=cfg.max_cycle_nodes)
    try:
        cycles = checker.find_all_cycles(graph)
    except CycleSearchLimitError as exc:
        return {"skipped": True, "reason": str(exc)}
    unbalanced = [c for c in cycles if not c.is_balanced]
    limit = cfg.report_cycle_limit
    return {
        "skipped": False,
        "num_cycles": len(cycles),
        "num_unbalanced": len(unbalanced),
        "cycles": [c.to_dict() for c in cycles[:limit]],
        "unbalanced": [c.to_dict() for c in unbalanced[:limit]],
        "truncated": len(cycles) > limit or len(unbalanced) > limit,
    }


def _super_node_section(graph: SignedGraph) -> dict[str, Any]:
    checker = SuperNodeBalanceChecker()
    super_nodes = checker.find_super_nodes(graph)
    integrity = checker.check_super_nodes_integrity(graph, super_nodes)
    section: dict[str, Any] = {
        "super_nodes": [sn.to_dict() for sn in super_nodes],
        "integrity": integrity.to_dict(),
        "partition": None,
    }
    # A conflict already decides the verdict; the coloring is not attempted.
    if integrity.valid:
        section["partition"] = checker.partition_super_nodes(graph, super_nodes).to_dict()
    return section


def analyze_graph(
    graph: SignedGraph, cfg: BalanceConfig, name: str | None = None
) -> dict[str, Any]:
    """JSON-compatible summary of every checker's findings on ``graph``."""
    triangles = TriangleBalanceChecker().find_unbalanced_triangles(graph)
    verdicts = compare_checkers(graph, max_cycle_nodes=cfg.max_cycle_nodes)
    summary = {
        "name": name,
        "num_nodes": graph.node_count(),
        "num_edges": graph.edge_count(),
        "num_negative_edges": graph.negative_edge_count(),
        "complete": verdicts.complete,
        "edges": [[u, v, p.value] for u, v, p in graph.all_edges()],
        "triangles": {
            "num_unbalanced": len(triangles),
            "unbalanced": [t.to_dict() for t in triangles],
        },
        "cycles": _cycle_section(graph, cfg),
        "super_nodes": _super_node_section(graph),
        "verdicts": verdicts.to_dict(),
        "balanced": verdicts.balanced,
    }
    logger.info(
        "Analyzed %s: balanced=%s agree=%s",
        name or "graph",
        verdicts.balanced,
        verdicts.agree,
    )
    return summary


def crosscheck_random_graphs(cfg: BalanceConfig) -> dict[str, Any]:
    """Run all checkers over seeded random graphs and count disagreements.

    Even draws are planted two-faction graphs (balanced by construction, and
    every third of them complete); odd draws are unconstrained random graphs.
    """
    rng = np.random.default_rng(cfg.seed)
    disagreements: list[dict[str, Any]] = []
    planted_misses = 0
    n_balanced = 0

    for index in range(cfg.crosscheck_graphs):
        n = int(rng.integers(cfg.crosscheck_min_nodes, cfg.crosscheck_max_nodes + 1))
        planted = index % 2 == 0
        if planted:
            complete = index % 3 == 0
            if complete:
                n = min(n, cfg.crosscheck_complete_max_nodes)
            graph, _ = planted_faction_graph(rng, n, cfg.crosscheck_edge_prob, complete=complete)
        else:
            graph = random_signed_graph(
                rng, n, cfg.crosscheck_edge_prob, cfg.crosscheck_negative_prob
            )

        verdicts = compare_checkers(graph, max_cycle_nodes=cfg.max_cycle_nodes)
        n_balanced += int(verdicts.balanced)
        # Planted graphs are balanced, so every checker that ran must say so.
        if planted and not (
            verdicts.balanced and verdicts.cycle is not False and verdicts.triangle
        ):
            planted_misses += 1
        if not verdicts.agree:
            disagreements.append(
                {"index": index, "graph": graph.to_dict(), "verdicts": verdicts.to_dict()}
            )

    logger.info(
        "Cross-checked %d graphs: %d disagreements, %d planted misses",
        cfg.crosscheck_graphs,
        len(disagreements),
        planted_misses,
    )
    return {
        "seed": cfg.seed,
        "num_graphs": cfg.crosscheck_graphs,
        "num_balanced": n_balanced,
        "num_disagreements": len(disagreements),
        "planted_misses": planted_misses,
        "disagreements": disagreements,
        "passed": not disagreements and planted_misses == 0,
    }
