"""Sample and randomly generated signed graphs."""

from .generators import from_networkx, planted_faction_graph, random_signed_graph, to_networkx
from .samples import (
    SAMPLE_GRAPHS,
    SampleGraph,
    build_balanced_quad,
    build_balanced_triangle,
    build_complex_network_15,
    build_mixed_square,
    build_sample_graph,
    build_unbalanced_quad,
    build_unbalanced_triangle,
)

__all__ = [
    "SAMPLE_GRAPHS",
    "SampleGraph",
    "build_balanced_quad",
    "build_balanced_triangle",
    "build_complex_network_15",
    "build_mixed_square",
    "build_sample_graph",
    "build_unbalanced_quad",
    "build_unbalanced_triangle",
    "from_networkx",
    "planted_faction_graph",
    "random_signed_graph",
    "to_networkx",
]
