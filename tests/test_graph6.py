"""Tests for lonelyedges.io.graph6."""
import networkx as nx
import pytest

from lonelyedges.errors import InvalidGraphInput
from lonelyedges.io.graph6 import (
    adjlist_to_g6,
    g6_to_adjlist,
    g6_to_nx,
    graph6_vertex_count,
    strip_graph6_header,
)


def test_strip_header():
    assert strip_graph6_header(">>graph6<<C~\n") == "C~"


def test_decode_k4():
    adj = g6_to_adjlist("C~")
    assert adj == [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]


def test_encode_path_bit_layout():
    # P3: bits (0,1)=1 (0,2)=0 (1,2)=1 padded to 101000 -> 40+63 = 'g'
    assert adjlist_to_g6([[1], [0, 2], [1]]) == "Bg"


def test_encode_k4_and_triangle():
    assert adjlist_to_g6([[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]) == "C~"
    assert adjlist_to_g6([[1, 2], [0, 2], [0, 1]]) == "Bw"


def test_round_trip_keeps_labeling():
    for n in (0, 1, 5, 9, 13):
        G = nx.gnp_random_graph(n, 0.4, seed=n)
        adj = [sorted(G.neighbors(u)) for u in range(n)]
        assert g6_to_adjlist(adjlist_to_g6(adj)) == adj


def test_round_trip_large_n():
    # n > 62 uses the four-byte size prefix
    G = nx.cycle_graph(70)
    adj = [sorted(G.neighbors(u)) for u in range(70)]
    g6 = adjlist_to_g6(adj)
    assert g6[0] == "~"
    assert graph6_vertex_count(g6) == 70
    assert g6_to_adjlist(g6) == adj


def test_vertex_count_prefixes():
    assert graph6_vertex_count("?") == 0
    assert graph6_vertex_count("C~") == 4
    assert graph6_vertex_count("~??~") == 63
    assert graph6_vertex_count("~~???@??") == 4096


@pytest.mark.parametrize("bad", ["", "\n", "C", "C~~", "##", "~"])
def test_invalid_strings(bad):
    with pytest.raises(InvalidGraphInput):
        g6_to_nx(bad)


def test_invalid_prefix():
    with pytest.raises(InvalidGraphInput):
        graph6_vertex_count("~~??")
