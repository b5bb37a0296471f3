"""Tests for lonelyedges.matching: enumeration and lonely-edge classification."""
from itertools import combinations

import networkx as nx
import pytest

from lonelyedges.graph.model import build_graph
from lonelyedges.matching.search import (
    CoverageAccumulator,
    accumulate_matchings,
    enumerate_matchings,
    perfect_matchings,
)
from lonelyedges.matching.lonely import classify, lonely_edges_g6
from lonelyedges.utils.bitset import BitSet


def graph_of(G: nx.Graph):
    n = G.number_of_nodes()
    return build_graph([sorted(G.neighbors(u)) for u in range(n)])


def brute_force_lonely(G: nx.Graph) -> set:
    """Edges lying in exactly one perfect matching, by trying every edge subset."""
    n = G.number_of_nodes()
    if n % 2:
        return set()
    edges = [tuple(sorted(e)) for e in G.edges()]
    hits = {e: 0 for e in edges}
    for M in combinations(edges, n // 2):
        covered = {x for e in M for x in e}
        if len(covered) == n:
            for e in M:
                hits[e] += 1
    return {e for e, c in hits.items() if c == 1}


# --- enumeration ---

def test_k4_has_three_matchings():
    g = graph_of(nx.complete_graph(4))
    found = perfect_matchings(g)
    assert len(found) == 3
    assert [g.edge_pairs(M) for M in found] == [
        [(0, 1), (2, 3)],
        [(0, 2), (1, 3)],
        [(0, 3), (1, 2)],
    ]


def test_matchings_are_perfect_and_distinct():
    G = nx.petersen_graph()
    g = graph_of(G)
    found = perfect_matchings(g)
    assert len(found) == 6
    assert len({M.bits for M in found}) == 6
    for M in found:
        assert nx.is_perfect_matching(G, set(g.edge_pairs(M)))


def test_empty_target_yields_partial_matching_once():
    g = graph_of(nx.complete_graph(4))
    seen = []
    start = BitSet.singleton(0, g.capacity)
    enumerate_matchings(g, BitSet.empty(g.capacity), start, seen.append)
    assert seen == [start]


def test_odd_target_yields_nothing():
    g = graph_of(nx.complete_graph(5))
    assert perfect_matchings(g) == []
    g4 = graph_of(nx.complete_graph(4))
    assert perfect_matchings(g4, BitSet.from_iterable([0, 1, 2], g4.capacity)) == []


def test_restricted_target():
    g = graph_of(nx.cycle_graph(6))
    target = BitSet.from_iterable([1, 2, 3, 4], g.capacity)
    found = perfect_matchings(g, target)
    assert [g.edge_pairs(M) for M in found] == [[(1, 2), (3, 4)]]


# --- coverage accumulator ---

def test_coverage_accumulator():
    acc = CoverageAccumulator(8)
    acc.add(BitSet.from_iterable([0, 1], 8))
    acc.add(BitSet.from_iterable([1, 2], 8))
    acc(BitSet.from_iterable([3], 8))
    assert list(acc.hit_once) == [0, 1, 2, 3]
    assert list(acc.hit_twice) == [1]
    assert list(acc.exactly_once()) == [0, 2, 3]
    assert acc.matchings == 3


def test_accumulate_matchings_observer():
    g = graph_of(nx.cycle_graph(4))
    seen = []
    acc = accumulate_matchings(g, g.vertices(), seen.append)
    assert len(seen) == 2
    assert acc.matchings == 2
    assert len(acc.hit_once) == 4
    assert len(acc.hit_twice) == 0


# --- classification ---

@pytest.mark.parametrize(
    "G, matchings, count",
    [
        (nx.complete_graph(4), 3, 6),
        (nx.complete_graph(2), 1, 1),
        (nx.complete_graph(3), 0, 0),
        (nx.cycle_graph(4), 2, 4),
        (nx.cycle_graph(6), 2, 6),
        (nx.circular_ladder_graph(3), 4, 6),
        (nx.complete_bipartite_graph(3, 3), 6, 0),
        (nx.petersen_graph(), 6, 0),
        (nx.cubical_graph(), 9, 0),
        (nx.empty_graph(0), 1, 0),
    ],
)
def test_classify_known_graphs(G, matchings, count):
    res = classify(graph_of(G))
    assert res.matchings == matchings
    assert res.count == count
    assert len(res.edges) == count


def test_odd_vertex_count_has_no_lonely_edges():
    for n in (1, 3, 5, 7):
        assert classify(graph_of(nx.complete_graph(n))).count == 0


def test_classify_reports_each_matching():
    g = graph_of(nx.complete_graph(4))
    seen = []
    classify(g, on_matching=seen.append)
    assert len(seen) == 3


def test_lonely_edges_g6():
    assert lonely_edges_g6("C~") == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert lonely_edges_g6("Bw") == []


def test_matches_brute_force_on_atlas():
    # every graph on at most 7 vertices
    for G in nx.graph_atlas_g():
        g = graph_of(G)
        got = set(g.edge_pairs(classify(g).edges))
        assert got == brute_force_lonely(G)


@pytest.mark.parametrize("n", [8, 9, 10])
def test_matches_brute_force_random(n):
    for seed in range(5):
        G = nx.gnp_random_graph(n, 0.35, seed=seed)
        g = graph_of(G)
        got = set(g.edge_pairs(classify(g).edges))
        assert got == brute_force_lonely(G)
