from .search import (
    CoverageAccumulator,
    accumulate_matchings,
    enumerate_matchings,
    perfect_matchings,
)
from .lonely import LonelyEdges, classify, lonely_edges_g6

__all__ = [
    "CoverageAccumulator",
    "accumulate_matchings",
    "enumerate_matchings",
    "perfect_matchings",
    "LonelyEdges",
    "classify",
    "lonely_edges_g6",
]
