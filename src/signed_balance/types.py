"""Core signed-graph types: polarity, the graph itself and checker result records."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

NodeId = Hashable


class Polarity(Enum):
    POSITIVE = "+"
    NEGATIVE = "-"

    @classmethod
    def from_token(cls, token: Any) -> Polarity:
        """Parse ``"+"``/``"-"`` (or a member name such as ``"NEGATIVE"``)."""
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            stripped = token.strip()
            for member in cls:
                if stripped == member.value or stripped.upper() == member.name:
                    return member
        raise ValueError(f"unknown polarity token: {token!r}")

    @property
    def is_negative(self) -> bool:
        return self is Polarity.NEGATIVE


class SignedGraph:
    """Undirected graph whose edges carry a ``Polarity``.

    Adjacency is a symmetric ``node -> {neighbor: polarity}`` mapping; both
    directions are written together so ``edge_label(u, v) == edge_label(v, u)``
    always holds. Node iteration follows insertion order. Queries on unknown
    nodes return empty results (or ``None``) instead of raising.

    Self-loops are not rejected but are undefined input for every checker.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, edges: Iterable[tuple[NodeId, NodeId, Polarity]] | None = None) -> None:
        self._adjacency: dict[NodeId, dict[NodeId, Polarity]] = {}
        for u, v, polarity in edges or ():
            self.add_edge(u, v, polarity)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"SignedGraph(nodes={self.node_count()}, edges={self.edge_count()})"

    def add_node(self, node: NodeId) -> None:
        """Register ``node`` with an empty adjacency; no-op if already present."""
        self._adjacency.setdefault(node, {})

    def add_edge(self, u: NodeId, v: NodeId, polarity: Polarity) -> None:
        """Set ``edge(u, v) = edge(v, u) = polarity``, overwriting any prior sign."""
        polarity = Polarity.from_token(polarity)
        self.add_node(u)
        self.add_node(v)
        self._adjacency[u][v] = polarity
        self._adjacency[v][u] = polarity

    def remove_edge(self, u: NodeId, v: NodeId) -> None:
        """Drop the undirected edge ``u``-``v``; both endpoints stay in the graph."""
        self._adjacency.get(u, {}).pop(v, None)
        self._adjacency.get(v, {}).pop(u, None)

    def has_edge(self, u: NodeId, v: NodeId) -> bool:
        return v in self._adjacency.get(u, {})

    def edge_label(self, u: NodeId, v: NodeId) -> Polarity | None:
        return self._adjacency.get(u, {}).get(v)

    def neighbors(self, node: NodeId) -> list[NodeId]:
        return list(self._adjacency.get(node, {}))

    def neighbors_with_labels(self, node: NodeId) -> list[tuple[NodeId, Polarity]]:
        return list(self._adjacency.get(node, {}).items())

    def all_nodes(self) -> list[NodeId]:
        return list(self._adjacency)

    def all_edges(self) -> list[tuple[NodeId, NodeId, Polarity]]:
        """Every undirected edge once, as ``(u, v, polarity)``.

        The reverse adjacency entry is suppressed by keying each pair on its
        sorted endpoints; the reported orientation is the first one met.
        """
        edges: list[tuple[NodeId, NodeId, Polarity]] = []
        seen: set[tuple[NodeId, NodeId]] = set()
        for u, row in self._adjacency.items():
            for v, polarity in row.items():
                key = (u, v) if u <= v else (v, u)
                if key in seen:
                    continue
                seen.add(key)
                edges.append((u, v, polarity))
        return edges

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        # A self-loop occupies a single adjacency slot, so count it separately.
        loops = sum(1 for node, row in self._adjacency.items() if node in row)
        degree_sum = sum(len(row) for row in self._adjacency.values())
        return (degree_sum - loops) // 2 + loops

    def negative_edge_count(self) -> int:
        return sum(1 for _, _, polarity in self.all_edges() if polarity.is_negative)

    def is_complete(self) -> bool:
        """True when every pair of distinct nodes is joined by an edge."""
        n = self.node_count()
        return all(
            len(row) - (1 if node in row else 0) == n - 1
            for node, row in self._adjacency.items()
        )

    def copy(self) -> SignedGraph:
        clone = SignedGraph()
        clone._adjacency = {node: dict(row) for node, row in self._adjacency.items()}
        return clone

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-compatible dict; isolated nodes are kept."""
        return {
            "nodes": self.all_nodes(),
            "edges": [
                {"u": u, "v": v, "polarity": polarity.value}
                for u, v, polarity in self.all_edges()
            ],
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> SignedGraph:
        """Deserialise from a dict produced by ``to_dict``.

        ``nodes`` is optional; each edge may be a mapping with ``u``/``v``/
        ``polarity`` keys or a ``[u, v, polarity]`` triple. Node ids must be
        hashable and mutually comparable (the checkers sort them); anything
        else raises ``ValueError``.
        """
        graph = cls()
        for node in d.get("nodes", []):
            _require_hashable(node, "node")
            graph.add_node(node)
        for index, edge in enumerate(d.get("edges", [])):
            if isinstance(edge, dict):
                try:
                    u, v, token = edge["u"], edge["v"], edge["polarity"]
                except KeyError as exc:
                    raise ValueError(f"edge #{index} is missing key {exc.args[0]!r}") from exc
            elif isinstance(edge, (list, tuple)) and len(edge) == 3:
                u, v, token = edge
            else:
                raise ValueError(f"edge #{index} must be a mapping or a [u, v, polarity] triple")
            _require_hashable(u, f"edge #{index} endpoint")
            _require_hashable(v, f"edge #{index} endpoint")
            graph.add_edge(u, v, Polarity.from_token(token))
        try:
            sorted(graph.all_nodes())
        except TypeError as exc:
            raise ValueError(f"node ids must be mutually comparable: {exc}") from exc
        return graph


def _require_hashable(node: Any, what: str) -> None:
    try:
        hash(node)
    except TypeError as exc:
        raise ValueError(f"{what} {node!r} is not a hashable node id") from exc


@dataclass(slots=True)
class UnbalancedTriangle:
    """A complete triangle with an odd number of negative edges.

    ``edges`` are the labels of (n0-n1, n1-n2, n0-n2) in that order.
    """

    nodes: tuple[NodeId, NodeId, NodeId]
    edges: tuple[Polarity, Polarity, Polarity]
    negative_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "edges": [p.value for p in self.edges],
            "negative_count": self.negative_count,
        }


@dataclass(slots=True)
class Cycle:
    """A simple cycle; ``edges[i]`` labels ``nodes[i]``-``nodes[(i + 1) % len]``."""

    nodes: tuple[NodeId, ...]
    edges: tuple[Polarity, ...]
    negative_count: int

    @property
    def length(self) -> int:
        return len(self.nodes)

    @property
    def is_balanced(self) -> bool:
        return self.negative_count % 2 == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "edges": [p.value for p in self.edges],
            "negative_count": self.negative_count,
            "balanced": self.is_balanced,
        }


@dataclass(frozen=True, slots=True)
class SuperNode:
    """A maximal set of nodes connected through positive edges only."""

    id: int
    nodes: frozenset[NodeId] = field(default_factory=frozenset)

    def __contains__(self, node: object) -> bool:
        return node in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "nodes": sorted(self.nodes)}


@dataclass(slots=True)
class IntegrityConflict:
    """A negative edge whose endpoints share a super-node."""

    super_node_id: int
    edge: tuple[NodeId, NodeId]

    def to_dict(self) -> dict[str, Any]:
        return {"super_node_id": self.super_node_id, "edge": list(self.edge)}


@dataclass(slots=True)
class IntegrityReport:
    valid: bool
    conflicts: list[IntegrityConflict] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "conflicts": [c.to_dict() for c in self.conflicts]}


@dataclass(slots=True)
class PartitionResult:
    """Two-coloring of the super-node graph; groups are ``None`` on failure."""

    success: bool
    group_x: list[int] | None = None
    group_y: list[int] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"success": self.success, "group_x": self.group_x, "group_y": self.group_y}
