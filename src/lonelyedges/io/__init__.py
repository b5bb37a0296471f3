from .graph6 import (
    strip_graph6_header,
    graph6_vertex_count,
    g6_to_nx,
    g6_to_adjlist,
    adjlist_to_nx,
    adjlist_to_g6,
)

__all__ = [
    "strip_graph6_header",
    "graph6_vertex_count",
    "g6_to_nx",
    "g6_to_adjlist",
    "adjlist_to_nx",
    "adjlist_to_g6",
]
