"""Local balance test over complete triangles.

Every triple of nodes (taken in sorted order, i < j < k) whose three edges
all exist is a triangle; it is unbalanced when it carries an odd number of
negative edges (1 or 3). Triples with a missing edge are skipped, never
flagged.

This is exact for complete graphs only. On sparser graphs imbalance can
live on longer cycles that no triangle covers, so ``is_balanced`` may
return True for a graph the cycle and super-node checkers reject.
"""

from __future__ import annotations

import logging
from itertools import combinations

from signed_balance.types import Polarity, SignedGraph, UnbalancedTriangle

logger = logging.getLogger(__name__)


class TriangleBalanceChecker:
    def find_unbalanced_triangles(self, graph: SignedGraph) -> list[UnbalancedTriangle]:
        nodes = sorted(graph.all_nodes())
        unbalanced: list[UnbalancedTriangle] = []
        n_triangles = 0

        for a, b, c in combinations(nodes, 3):
            ab = graph.edge_label(a, b)
            bc = graph.edge_label(b, c)
            ac = graph.edge_label(a, c)
            if ab is None or bc is None or ac is None:
                continue
            n_triangles += 1
            negative_count = sum(1 for p in (ab, bc, ac) if p is Polarity.NEGATIVE)
            if negative_count % 2 == 1:
                unbalanced.append(
                    UnbalancedTriangle(
                        nodes=(a, b, c),
                        edges=(ab, bc, ac),
                        negative_count=negative_count,
                    )
                )

        logger.debug(
            "Triangle check: %d complete triangles, %d unbalanced", n_triangles, len(unbalanced)
        )
        return unbalanced

    def is_balanced(self, graph: SignedGraph) -> bool:
        return not self.find_unbalanced_triangles(graph)
