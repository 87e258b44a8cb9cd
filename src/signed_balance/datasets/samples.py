"""Hand-built sample networks used as fixtures and CLI inputs.

The two triangles and the two K4 graphs are complete, so all three checkers
must agree on them. ``complex_network_15`` is a sparse 15-node network
with several disconnected-looking regions joined by negative ties; only
the cycle and super-node checkers are exact on it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..types import Polarity, SignedGraph

_P = Polarity.POSITIVE
_N = Polarity.NEGATIVE


def _from_edges(edges: list[tuple[str, str, Polarity]]) -> SignedGraph:
    graph = SignedGraph()
    for u, v, polarity in edges:
        graph.add_edge(u, v, polarity)
    return graph


def build_balanced_triangle() -> SignedGraph:
    return _from_edges([("A", "B", _P), ("A", "C", _P), ("B", "C", _P)])


def build_unbalanced_triangle() -> SignedGraph:
    return _from_edges([("A", "B", _P), ("A", "C", _P), ("B", "C", _N)])


def build_balanced_quad() -> SignedGraph:
    """K4 split into factions {A, B} and {C, D}."""
    return _from_edges(
        [
            ("A", "C", _N),
            ("A", "B", _P),
            ("A", "D", _N),
            ("B", "C", _N),
            ("B", "D", _N),
            ("C", "D", _P),
        ]
    )


def build_unbalanced_quad() -> SignedGraph:
    return _from_edges(
        [
            ("A", "B", _N),
            ("A", "C", _P),
            ("A", "D", _N),
            ("B", "C", _P),
            ("B", "D", _P),
            ("C", "D", _N),
        ]
    )


def build_mixed_square() -> SignedGraph:
    """4-cycle with two negative edges: a single balanced cycle."""
    return _from_edges([("A", "B", _N), ("B", "C", _P), ("C", "D", _N), ("D", "A", _P)])


def build_complex_network_15() -> SignedGraph:
    return _from_edges(
        [
            # upper triangle
            ("1", "2", _P),
            ("1", "3", _P),
            ("2", "3", _P),
            # middle
            ("2", "4", _N),
            ("2", "5", _P),
            ("3", "6", _N),
            ("5", "6", _N),
            # lower left
            ("4", "7", _N),
            ("4", "9", _N),
            ("7", "12", _P),
            ("9", "12", _P),
            # upper right
            ("6", "8", _P),
            ("6", "11", _N),
            ("8", "11", _N),
            # bottom
            ("10", "11", _N),
            ("11", "14", _N),
            ("12", "13", _P),
            ("13", "15", _N),
            ("14", "15", _N),
        ]
    )


@dataclass(frozen=True, slots=True)
class SampleGraph:
    name: str
    description: str
    build: Callable[[], SignedGraph]


SAMPLE_GRAPHS: dict[str, SampleGraph] = {
    sample.name: sample
    for sample in (
        SampleGraph(
            "balanced_triangle",
            "Balanced triangle: A-B(+), A-C(+), B-C(+)",
            build_balanced_triangle,
        ),
        SampleGraph(
            "unbalanced_triangle",
            "Unbalanced triangle: A-B(+), A-C(+), B-C(-)",
            build_unbalanced_triangle,
        ),
        SampleGraph(
            "balanced_quad",
            "Balanced K4: A-C(-), A-B(+), A-D(-), B-C(-), B-D(-), C-D(+)",
            build_balanced_quad,
        ),
        SampleGraph(
            "unbalanced_quad",
            "Unbalanced K4: A-B(-), A-C(+), A-D(-), B-C(+), B-D(+), C-D(-)",
            build_unbalanced_quad,
        ),
        SampleGraph(
            "mixed_square",
            "Square: A-B(-), B-C(+), C-D(-), D-A(+)",
            build_mixed_square,
        ),
        SampleGraph(
            "complex_network_15",
            "Sparse 15-node network (not complete)",
            build_complex_network_15,
        ),
    )
}


def build_sample_graph(name: str) -> SignedGraph:
    try:
        sample = SAMPLE_GRAPHS[name]
    except KeyError:
        known = ", ".join(sorted(SAMPLE_GRAPHS))
        raise ValueError(f"unknown sample graph {name!r}; expected one of: {known}") from None
    return sample.build()
