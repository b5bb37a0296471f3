from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from lonelyedges.config import MAX_SET_SIZE
from lonelyedges.errors import InvalidGraphInput
from lonelyedges.io.graph6 import g6_to_adjlist, graph6_vertex_count
from lonelyedges.utils.bitset import BitSet


Edge = Tuple[int, int]


@dataclass(frozen=True)
class Graph:
    """
    Simple undirected graph on 0..n-1 with a dense edge numbering.

    adjacency[v]: BitSet of neighbours of v
    edges[e]:     endpoints (u, v), u < v, of edge id e
    edge_index:   inverse of edges, keyed by (u, v) with u < v

    Edge ids follow the canonical scan: vertices ascending, and for each
    vertex its larger neighbours ascending.
    """

    n: int
    adjacency: Tuple[BitSet, ...]
    edges: Tuple[Edge, ...]
    edge_index: Dict[Edge, int]
    capacity: int = MAX_SET_SIZE

    @property
    def m(self) -> int:
        return len(self.edges)

    def edge_id(self, u: int, v: int) -> int:
        return self.edge_index[(u, v) if u < v else (v, u)]

    def neighbors(self, v: int) -> BitSet:
        return self.adjacency[v]

    def degree(self, v: int) -> int:
        return len(self.adjacency[v])

    def is_cubic(self) -> bool:
        return all(len(nbrs) == 3 for nbrs in self.adjacency)

    def vertices(self) -> BitSet:
        return BitSet.full(self.n, self.capacity)

    def adjlist(self) -> List[List[int]]:
        return [list(nbrs) for nbrs in self.adjacency]

    def edge_pairs(self, edge_set: Iterable[int]) -> List[Edge]:
        """Endpoints of the given edge ids, in id order."""
        return [self.edges[e] for e in sorted(edge_set)]


def build_graph(
    adj: Sequence[Iterable[int]],
    n: Optional[int] = None,
    *,
    capacity: int = MAX_SET_SIZE,
) -> Graph:
    """
    Build a Graph from an adjacency list.

    Raises InvalidGraphInput if n exceeds the capacity, if the adjacency is
    not that of a simple undirected graph, or if there are more edges than
    the capacity allows.
    """
    if n is None:
        n = len(adj)
    if n != len(adj):
        raise InvalidGraphInput(f"adjacency list has {len(adj)} rows, expected {n}")
    if n > capacity:
        raise InvalidGraphInput(f"{n} vertices exceed the set capacity {capacity}")

    neigh: List[BitSet] = []
    for u, row in enumerate(adj):
        nbrs = BitSet.empty(capacity)
        for v in row:
            if not 0 <= v < n:
                raise InvalidGraphInput(f"neighbour {v} of vertex {u} out of range")
            if v == u:
                raise InvalidGraphInput(f"self-loop at vertex {u}")
            nbrs.add(v)
        neigh.append(nbrs)

    for u in range(n):
        for v in neigh[u]:
            if u not in neigh[v]:
                raise InvalidGraphInput(f"asymmetric adjacency between {u} and {v}")

    edges: List[Edge] = []
    edge_index: Dict[Edge, int] = {}
    for u in range(n):
        for v in neigh[u]:
            if v <= u:
                continue
            if len(edges) == capacity:
                raise InvalidGraphInput(f"more than {capacity} edges")
            edge_index[(u, v)] = len(edges)
            edges.append((u, v))

    return Graph(
        n=n,
        adjacency=tuple(neigh),
        edges=tuple(edges),
        edge_index=edge_index,
        capacity=capacity,
    )


def graph_from_g6(g6: str, *, capacity: int = MAX_SET_SIZE) -> Graph:
    """Decode a graph6 line and build its Graph; InvalidGraphInput on failure."""
    n = graph6_vertex_count(g6)
    if n > capacity:
        raise InvalidGraphInput(f"{n} vertices exceed the set capacity {capacity}")
    return build_graph(g6_to_adjlist(g6), n, capacity=capacity)
