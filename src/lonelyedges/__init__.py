"""
lonelyedges: lonely edges (edges in exactly one perfect matching) of graphs,
and triangle blow-up children of cubic graphs.
"""

from .io.graph6 import g6_to_nx, g6_to_adjlist, adjlist_to_g6
from .graph.model import Graph, build_graph, graph_from_g6
from .matching.search import (
    CoverageAccumulator,
    enumerate_matchings,
    perfect_matchings,
)
from .matching.lonely import LonelyEdges, classify, lonely_edges_g6
from .children.blowup import (
    Child,
    blow_up_to_triangle,
    all_children,
    v_join_edges,
    children_preserving_lonely_count,
)
from .utils.bitset import BitSet
from .errors import (
    InvalidGraphInput,
    ConfigurationConflict,
    UnrecognizedOption,
    NotCubicError,
)

__all__ = [
    # IO
    "g6_to_nx",
    "g6_to_adjlist",
    "adjlist_to_g6",
    # Graph
    "Graph",
    "build_graph",
    "graph_from_g6",
    # Matchings
    "CoverageAccumulator",
    "enumerate_matchings",
    "perfect_matchings",
    "LonelyEdges",
    "classify",
    "lonely_edges_g6",
    # Children
    "Child",
    "blow_up_to_triangle",
    "all_children",
    "v_join_edges",
    "children_preserving_lonely_count",
    # Utils
    "BitSet",
    # Errors
    "InvalidGraphInput",
    "ConfigurationConflict",
    "UnrecognizedOption",
    "NotCubicError",
]
