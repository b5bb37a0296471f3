from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from lonelyedges.errors import NotCubicError
from lonelyedges.graph.model import Graph
from lonelyedges.io.graph6 import adjlist_to_g6
from lonelyedges.matching.search import OnComplete, accumulate_matchings
from lonelyedges.utils.bitset import BitSet


@dataclass(frozen=True)
class Child:
    """
    Graph obtained by blowing up `vertex` of a parent into a triangle.

    adj[u] = sorted neighbours of u; the new triangle vertices are the
    last two labels.
    """

    vertex: int
    adj: List[List[int]]

    @property
    def n(self) -> int:
        return len(self.adj)

    @property
    def m(self) -> int:
        return sum(len(neigh) for neigh in self.adj) // 2

    def to_g6(self) -> str:
        return adjlist_to_g6(self.adj)


def blow_up_to_triangle(graph: Graph, v: int) -> List[List[int]]:
    """
    Replace the degree-3 vertex v by a triangle {v, a, b} with a = n, b = n+1.

    The two smallest neighbours of v are reattached to a and b respectively;
    the third stays on v. On a cubic graph the result is cubic again with
    two more vertices and three more edges.
    """
    if graph.degree(v) != 3:
        raise NotCubicError(f"vertex {v} has degree {graph.degree(v)}, expected 3")

    n = graph.n
    adj = [set(nbrs) for nbrs in graph.adjacency]
    adj.append({v, n + 1})
    adj.append({v, n})

    for k, nbr in enumerate(list(graph.neighbors(v))[:2]):
        new = n + k
        adj[nbr].discard(v)
        adj[v].discard(nbr)
        adj[nbr].add(new)
        adj[new].add(nbr)
        adj[v].add(new)

    return [sorted(s) for s in adj]


def all_children(graph: Graph) -> Iterator[Child]:
    """
    One child per vertex, in vertex order. Children may be isomorphic.
    """
    for v in range(graph.n):
        yield Child(vertex=v, adj=blow_up_to_triangle(graph, v))


def v_join_edges(graph: Graph, v: int, on_matching: Optional[OnComplete] = None) -> BitSet:
    """
    Edges hit by some v-join: a perfect matching of G - v - N(v).

    Edges at v never qualify, since v and its neighbours are excluded.
    """
    closed = graph.neighbors(v) | BitSet.singleton(v, graph.capacity)
    remaining = closed.complement(graph.n)
    return accumulate_matchings(graph, remaining, on_matching).hit_once


def children_preserving_lonely_count(
    graph: Graph,
    lonely: BitSet,
    on_matching: Optional[OnComplete] = None,
) -> Iterator[Child]:
    """
    Children of a cubic graph with the same number of lonely edges as the parent.

    Blowing up v adds the v-joins to the perfect matchings of the child, so a
    lonely edge stays lonely iff no v-join contains it; a lonely edge at v
    passes its loneliness on to the opposite triangle edge. Hence the count
    is preserved exactly when no lonely edge lies in a v-join, which is
    decided without building or classifying the child.
    """
    for v in range(graph.n):
        if v_join_edges(graph, v, on_matching) & lonely:
            continue
        yield Child(vertex=v, adj=blow_up_to_triangle(graph, v))
