"""Random signed-graph generation and networkx conversion.

Topologies come from ``networkx`` generators seeded by a
``numpy.random.Generator`` so every draw is reproducible from one seed.
"""

from __future__ import annotations

from typing import Any

import networkx as nx
import numpy as np

from ..types import NodeId, Polarity, SignedGraph

POLARITY_ATTR = "polarity"


def _coerce_polarity(value: Any) -> Polarity:
    if isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool):
        if value == 0:
            raise ValueError("numeric polarity must be non-zero")
        return Polarity.POSITIVE if value > 0 else Polarity.NEGATIVE
    return Polarity.from_token(value)


def to_networkx(graph: SignedGraph, attr: str = POLARITY_ATTR) -> nx.Graph:
    """Copy ``graph`` into an ``nx.Graph`` with polarity tokens on each edge."""
    out = nx.Graph()
    out.add_nodes_from(graph.all_nodes())
    for u, v, polarity in graph.all_edges():
        out.add_edge(u, v, **{attr: polarity.value})
    return out


def from_networkx(nx_graph: nx.Graph, attr: str = POLARITY_ATTR) -> SignedGraph:
    """Build a SignedGraph from an undirected ``nx.Graph``.

    The edge attribute may hold a ``Polarity``, a ``"+"``/``"-"`` token or a
    non-zero number (positive means ``+``). Nodes are added in sorted order.
    """
    if nx_graph.is_directed():
        raise ValueError("signed directed graphs are not supported")
    if nx_graph.is_multigraph():
        raise ValueError("multigraphs are not supported")
    graph = SignedGraph()
    for node in sorted(nx_graph.nodes()):
        graph.add_node(node)
    for u, v, data in nx_graph.edges(data=True):
        if attr not in data:
            raise ValueError(f"edge {u!r}-{v!r} has no {attr!r} attribute")
        graph.add_edge(u, v, _coerce_polarity(data[attr]))
    return graph


def random_signed_graph(
    rng: np.random.Generator,
    n: int,
    edge_prob: float,
    negative_prob: float,
) -> SignedGraph:
    """Erdos-Renyi topology; each edge is negative with ``negative_prob``."""
    topology = nx.erdos_renyi_graph(n, edge_prob, seed=rng)
    graph = SignedGraph()
    for node in range(n):
        graph.add_node(node)
    for u, v in sorted(topology.edges()):
        negative = bool(rng.random() < negative_prob)
        graph.add_edge(u, v, Polarity.NEGATIVE if negative else Polarity.POSITIVE)
    return graph


def planted_faction_graph(
    rng: np.random.Generator,
    n: int,
    edge_prob: float,
    complete: bool = False,
) -> tuple[SignedGraph, dict[NodeId, int]]:
    """Balanced-by-construction graph plus its faction assignment.

    Every node joins faction 0 or 1 at random; edges inside a faction are
    positive and edges across factions negative.
    """
    topology = nx.complete_graph(n) if complete else nx.erdos_renyi_graph(n, edge_prob, seed=rng)
    factions = {node: int(rng.integers(0, 2)) for node in range(n)}
    graph = SignedGraph()
    for node in range(n):
        graph.add_node(node)
    for u, v in sorted(topology.edges()):
        same = factions[u] == factions[v]
        graph.add_edge(u, v, Polarity.POSITIVE if same else Polarity.NEGATIVE)
    return graph, factions
