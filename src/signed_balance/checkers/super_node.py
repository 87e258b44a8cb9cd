"""Constructive balance test by positive-edge contraction and two-coloring.

1. Contract every maximal positive-edge-connected component into a
   super-node (BFS over positive edges only).
2. Integrity: a negative edge between two members of one super-node means
   the graph cannot be balanced; such edges are reported as conflicts.
3. Two-color the super-node graph, whose edges are the negative edges
   crossing between super-nodes. Each component is seeded with color 0;
   a neighbor that already holds the same color as the current super-node
   makes the partition fail.

Balanced iff there are no conflicts and the coloring succeeds. Group X
holds the super-nodes colored 0, group Y those colored 1.
"""

from __future__ import annotations

import logging
from collections import deque
from itertools import combinations

from signed_balance.types import (
    IntegrityConflict,
    IntegrityReport,
    NodeId,
    PartitionResult,
    Polarity,
    SignedGraph,
    SuperNode,
)

logger = logging.getLogger(__name__)


class SuperNodeBalanceChecker:
    def find_super_nodes(self, graph: SignedGraph) -> list[SuperNode]:
        visited: set[NodeId] = set()
        super_nodes: list[SuperNode] = []

        for start in graph.all_nodes():
            if start in visited:
                continue
            visited.add(start)
            members = {start}
            queue = deque([start])
            while queue:
                current = queue.popleft()
                for target, label in graph.neighbors_with_labels(current):
                    if label is Polarity.POSITIVE and target not in visited:
                        visited.add(target)
                        members.add(target)
                        queue.append(target)
            super_nodes.append(SuperNode(id=len(super_nodes), nodes=frozenset(members)))

        logger.debug(
            "Contracted %d nodes into %d super-nodes", graph.node_count(), len(super_nodes)
        )
        return super_nodes

    def check_super_nodes_integrity(
        self, graph: SignedGraph, super_nodes: list[SuperNode]
    ) -> IntegrityReport:
        conflicts: list[IntegrityConflict] = []
        for super_node in super_nodes:
            for u, v in combinations(sorted(super_node.nodes), 2):
                if graph.edge_label(u, v) is Polarity.NEGATIVE:
                    conflicts.append(IntegrityConflict(super_node_id=super_node.id, edge=(u, v)))
        return IntegrityReport(valid=not conflicts, conflicts=conflicts)

    def _negative_super_node_graph(
        self, graph: SignedGraph, super_nodes: list[SuperNode]
    ) -> dict[int, set[int]]:
        owner: dict[NodeId, int] = {}
        for super_node in super_nodes:
            for node in super_node.nodes:
                owner[node] = super_node.id

        adjacency: dict[int, set[int]] = {sn.id: set() for sn in super_nodes}
        for u, v, label in graph.all_edges():
            if label is not Polarity.NEGATIVE:
                continue
            su, sv = owner.get(u), owner.get(v)
            if su is None or sv is None or su == sv:
                continue
            adjacency[su].add(sv)
            adjacency[sv].add(su)
        return adjacency

    def partition_super_nodes(
        self, graph: SignedGraph, super_nodes: list[SuperNode]
    ) -> PartitionResult:
        adjacency = self._negative_super_node_graph(graph, super_nodes)
        colors: dict[int, int] = {}

        for super_node in super_nodes:
            if super_node.id in colors:
                continue
            colors[super_node.id] = 0
            queue = deque([super_node.id])
            while queue:
                current = queue.popleft()
                needed = 1 - colors[current]
                for neighbor in sorted(adjacency[current]):
                    if neighbor not in colors:
                        colors[neighbor] = needed
                        queue.append(neighbor)
                    elif colors[neighbor] != needed:
                        logger.debug(
                            "Coloring conflict between super-nodes %d and %d", current, neighbor
                        )
                        return PartitionResult(success=False)

        group_x = [sn.id for sn in super_nodes if colors[sn.id] == 0]
        group_y = [sn.id for sn in super_nodes if colors[sn.id] == 1]
        return PartitionResult(success=True, group_x=group_x, group_y=group_y)

    def is_balanced(self, graph: SignedGraph) -> bool:
        super_nodes = self.find_super_nodes(graph)
        if not self.check_super_nodes_integrity(graph, super_nodes).valid:
            return False
        return self.partition_super_nodes(graph, super_nodes).success
