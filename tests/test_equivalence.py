"""The three checkers are formulations of one balance condition.

Cycle and super-node verdicts must always match; the triangle verdict must
match them on complete graphs.
"""

from __future__ import annotations

import numpy as np
import pytest

from signed_balance.checkers import (
    CycleBalanceChecker,
    SuperNodeBalanceChecker,
    TriangleBalanceChecker,
)
from signed_balance.datasets.generators import planted_faction_graph, random_signed_graph
from signed_balance.datasets.samples import SAMPLE_GRAPHS
from signed_balance.types import Polarity, SignedGraph

EXPECTED_BALANCE = {
    "balanced_triangle": True,
    "unbalanced_triangle": False,
    "balanced_quad": True,
    "unbalanced_quad": False,
    "mixed_square": True,
    "complex_network_15": False,
}


def _complete_signed_graph(rng: np.random.Generator, n: int, negative_prob: float) -> SignedGraph:
    graph = SignedGraph()
    for u in range(n):
        for v in range(u + 1, n):
            negative = rng.random() < negative_prob
            graph.add_edge(u, v, Polarity.NEGATIVE if negative else Polarity.POSITIVE)
    return graph


@pytest.mark.parametrize("name", sorted(SAMPLE_GRAPHS))
def test_sample_graph_verdicts(name):
    graph = SAMPLE_GRAPHS[name].build()
    expected = EXPECTED_BALANCE[name]
    assert CycleBalanceChecker().is_balanced(graph) is expected
    assert SuperNodeBalanceChecker().is_balanced(graph) is expected
    if graph.is_complete():
        assert TriangleBalanceChecker().is_balanced(graph) is expected


def test_all_checkers_agree_on_random_complete_graphs():
    rng = np.random.default_rng(7)
    for _ in range(40):
        graph = _complete_signed_graph(rng, int(rng.integers(3, 7)), 0.35)
        triangle = TriangleBalanceChecker().is_balanced(graph)
        cycle = CycleBalanceChecker().is_balanced(graph)
        super_node = SuperNodeBalanceChecker().is_balanced(graph)
        assert triangle == cycle == super_node


def test_cycle_and_super_node_agree_on_random_sparse_graphs():
    rng = np.random.default_rng(31)
    n_balanced = 0
    for _ in range(60):
        graph = random_signed_graph(rng, int(rng.integers(3, 10)), 0.35, 0.3)
        cycle = CycleBalanceChecker().is_balanced(graph)
        assert cycle == SuperNodeBalanceChecker().is_balanced(graph)
        n_balanced += int(cycle)
    # The draw should exercise both verdicts.
    assert 0 < n_balanced < 60


def test_triangle_never_rejects_what_exact_checkers_accept():
    rng = np.random.default_rng(17)
    for _ in range(40):
        graph = random_signed_graph(rng, int(rng.integers(3, 10)), 0.4, 0.4)
        if SuperNodeBalanceChecker().is_balanced(graph):
            assert TriangleBalanceChecker().is_balanced(graph)


@pytest.mark.parametrize("complete", [False, True])
def test_planted_factions_are_balanced_under_every_checker(complete):
    rng = np.random.default_rng(3)
    for _ in range(15):
        graph, _ = planted_faction_graph(rng, int(rng.integers(3, 8)), 0.5, complete=complete)
        assert TriangleBalanceChecker().is_balanced(graph)
        assert CycleBalanceChecker().is_balanced(graph)
        assert SuperNodeBalanceChecker().is_balanced(graph)


def test_flipping_one_edge_of_a_complete_planted_graph_breaks_balance():
    rng = np.random.default_rng(8)
    graph, _ = planted_faction_graph(rng, 5, 1.0, complete=True)
    u, v, polarity = graph.all_edges()[0]
    flipped = Polarity.POSITIVE if polarity is Polarity.NEGATIVE else Polarity.NEGATIVE
    graph.add_edge(u, v, flipped)
    assert not TriangleBalanceChecker().is_balanced(graph)
    assert not CycleBalanceChecker().is_balanced(graph)
    assert not SuperNodeBalanceChecker().is_balanced(graph)


def test_empty_graph_is_vacuously_balanced_everywhere():
    graph = SignedGraph()
    assert TriangleBalanceChecker().find_unbalanced_triangles(graph) == []
    assert CycleBalanceChecker().find_unbalanced_cycles(graph) == []
    checker = SuperNodeBalanceChecker()
    assert checker.check_super_nodes_integrity(graph, checker.find_super_nodes(graph)).valid
    assert TriangleBalanceChecker().is_balanced(graph)
    assert CycleBalanceChecker().is_balanced(graph)
    assert checker.is_balanced(graph)


def test_checkers_do_not_mutate_the_graph():
    graph = SAMPLE_GRAPHS["complex_network_15"].build()
    before = graph.to_dict()
    TriangleBalanceChecker().find_unbalanced_triangles(graph)
    CycleBalanceChecker().find_all_cycles(graph)
    SuperNodeBalanceChecker().is_balanced(graph)
    assert graph.to_dict() == before
