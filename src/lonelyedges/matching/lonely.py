from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from lonelyedges.graph.model import Edge, Graph, graph_from_g6
from lonelyedges.utils.bitset import BitSet
from .search import OnComplete, accumulate_matchings


@dataclass(frozen=True)
class LonelyEdges:
    """
    Lonely edges of a graph: edges lying in exactly one perfect matching.

    count:      number of lonely edges
    edges:      their edge ids
    matchings:  number of perfect matchings of the graph
    """

    count: int
    edges: BitSet
    matchings: int


def classify(graph: Graph, on_matching: Optional[OnComplete] = None) -> LonelyEdges:
    """
    Enumerate every perfect matching of `graph` and return its lonely edges.

    A graph without perfect matchings has no lonely edges.
    """
    acc = accumulate_matchings(graph, graph.vertices(), on_matching)
    lonely = acc.exactly_once()
    return LonelyEdges(count=len(lonely), edges=lonely, matchings=acc.matchings)


def lonely_edges_g6(g6: str) -> List[Edge]:
    """Endpoints of the lonely edges of a graph given in graph6."""
    graph = graph_from_g6(g6)
    return graph.edge_pairs(classify(graph).edges)
