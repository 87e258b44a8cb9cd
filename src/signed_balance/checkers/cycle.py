"""Exhaustive simple-cycle balance test.

A signed graph is balanced iff every simple cycle carries an even number of
negative edges. ``CycleBalanceChecker`` enumerates every simple cycle of
length >= 3 and checks that parity cycle by cycle; it never shortcuts on the
graph-wide negative-edge count.

Search
------
Each node in turn is the *anchor*. A depth-first search extends a path from
the anchor, entering only nodes that are not already on the path and whose
id is strictly greater than the anchor's, so a cycle is only ever reached
from its minimum node. Reaching the anchor again from a path of >= 3 nodes
closes a candidate cycle. The DFS keeps its frames on an explicit stack
(one neighbor iterator per path node), so depth is bounded by the node
count rather than the interpreter's recursion limit.

Each cycle is still found twice from its anchor, once per direction. The
two traversals collapse onto one ``canonical_cycle`` key: the node sequence
rotated to start at its minimum and then replaced by its reflection when
that is lexicographically smaller.

Scale
-----
Simple-cycle enumeration is exponential in the worst case. The checker is
meant for graphs of tens of nodes; pass ``max_nodes`` to refuse larger
inputs up front with ``CycleSearchLimitError``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from signed_balance.types import Cycle, NodeId, Polarity, SignedGraph

logger = logging.getLogger(__name__)


class CycleSearchLimitError(ValueError):
    """Raised before searching when a graph exceeds the configured node ceiling."""


def canonical_cycle(path: Sequence[NodeId]) -> tuple[NodeId, ...]:
    """Return the rotation/reflection-invariant key of a cycle.

    ``[B, C, A]``, ``[A, B, C]`` and ``[A, C, B]`` all map to ``(A, B, C)``.
    """
    if not path:
        return ()
    start = min(range(len(path)), key=path.__getitem__)
    rotated = tuple(path[start:]) + tuple(path[:start])
    reflected = (rotated[0],) + tuple(reversed(rotated[1:]))
    return min(rotated, reflected)


def cycle_polarities(graph: SignedGraph, nodes: Sequence[NodeId]) -> tuple[Polarity, ...]:
    """Labels of the closed walk ``nodes[0] -> ... -> nodes[-1] -> nodes[0]``."""
    labels: list[Polarity] = []
    for i, u in enumerate(nodes):
        v = nodes[(i + 1) % len(nodes)]
        label = graph.edge_label(u, v)
        if label is None:
            raise ValueError(f"{u!r}-{v!r} is not an edge; sequence is not a cycle")
        labels.append(label)
    return tuple(labels)


class CycleBalanceChecker:
    def __init__(self, max_nodes: int | None = None) -> None:
        if max_nodes is not None and max_nodes < 3:
            raise ValueError("max_nodes must be >= 3 or None")
        self.max_nodes = max_nodes

    def check_size(self, graph: SignedGraph) -> None:
        """Raise ``CycleSearchLimitError`` if ``graph`` exceeds ``max_nodes``."""
        if self.max_nodes is not None and graph.node_count() > self.max_nodes:
            raise CycleSearchLimitError(
                f"cycle search refused: {graph.node_count()} nodes exceeds "
                f"max_nodes={self.max_nodes}"
            )

    def find_all_cycles(self, graph: SignedGraph) -> list[Cycle]:
        self.check_size(graph)
        seen: set[tuple[NodeId, ...]] = set()
        cycles: list[Cycle] = []
        for anchor in graph.all_nodes():
            self._search_from(graph, anchor, seen, cycles)
        logger.debug(
            "Cycle check: %d simple cycles over %d nodes", len(cycles), graph.node_count()
        )
        return cycles

    def _search_from(
        self,
        graph: SignedGraph,
        anchor: NodeId,
        seen: set[tuple[NodeId, ...]],
        cycles: list[Cycle],
    ) -> None:
        path: list[NodeId] = [anchor]
        on_path: set[NodeId] = {anchor}
        frames = [iter(graph.neighbors(anchor))]

        while frames:
            for target in frames[-1]:
                if target == anchor:
                    if len(path) >= 3:
                        self._record(graph, path, seen, cycles)
                    continue
                if target in on_path or not target > anchor:
                    continue
                path.append(target)
                on_path.add(target)
                frames.append(iter(graph.neighbors(target)))
                break
            else:
                # Frame exhausted: backtrack one step.
                frames.pop()
                on_path.discard(path.pop())

    @staticmethod
    def _record(
        graph: SignedGraph,
        path: list[NodeId],
        seen: set[tuple[NodeId, ...]],
        cycles: list[Cycle],
    ) -> None:
        key = canonical_cycle(path)
        if key in seen:
            return
        seen.add(key)
        edges = cycle_polarities(graph, key)
        cycles.append(
            Cycle(
                nodes=key,
                edges=edges,
                negative_count=sum(1 for p in edges if p is Polarity.NEGATIVE),
            )
        )

    def find_unbalanced_cycles(self, graph: SignedGraph) -> list[Cycle]:
        return [cycle for cycle in self.find_all_cycles(graph) if not cycle.is_balanced]

    def is_balanced(self, graph: SignedGraph) -> bool:
        return all(cycle.is_balanced for cycle in self.find_all_cycles(graph))
