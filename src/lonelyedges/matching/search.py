from __future__ import annotations

from typing import Callable, List, Optional

from lonelyedges.graph.model import Graph
from lonelyedges.utils.bitset import BitSet


OnComplete = Callable[[BitSet], None]


def enumerate_matchings(
    graph: Graph,
    target: BitSet,
    matching: BitSet,
    on_complete: OnComplete,
) -> None:
    """
    Call on_complete once for every matching that extends `matching` and
    saturates exactly the vertices of `target`.

    The least vertex of `target` is always matched next, so every matching
    is produced exactly once. Odd or unmatchable targets produce nothing.
    """
    v = target.first()
    if v is None:
        on_complete(matching)
        return

    for w in graph.neighbors(v) & target:
        e = graph.edge_id(v, w)
        enumerate_matchings(
            graph,
            target - BitSet.from_iterable((v, w), graph.capacity),
            matching | BitSet.singleton(e, graph.capacity),
            on_complete,
        )


class CoverageAccumulator:
    """
    Running record of which edges were hit by at least one / at least two
    of the matchings seen so far.
    """

    def __init__(self, capacity: int):
        self.hit_once = BitSet.empty(capacity)
        self.hit_twice = BitSet.empty(capacity)
        self.matchings = 0

    def add(self, matching: BitSet) -> None:
        self.hit_twice = self.hit_twice | (self.hit_once & matching)
        self.hit_once = self.hit_once | matching
        self.matchings += 1

    __call__ = add

    def exactly_once(self) -> BitSet:
        return self.hit_once - self.hit_twice


def accumulate_matchings(
    graph: Graph,
    target: BitSet,
    on_matching: Optional[OnComplete] = None,
) -> CoverageAccumulator:
    """
    Enumerate the perfect matchings of the subgraph induced by `target`
    into a fresh CoverageAccumulator. on_matching, if given, sees each
    matching before it is accumulated.
    """
    acc = CoverageAccumulator(graph.capacity)
    if on_matching is None:
        sink: OnComplete = acc.add
    else:
        def sink(matching: BitSet) -> None:
            on_matching(matching)
            acc.add(matching)

    enumerate_matchings(graph, target, BitSet.empty(graph.capacity), sink)
    return acc


def perfect_matchings(graph: Graph, target: Optional[BitSet] = None) -> List[BitSet]:
    """All perfect matchings of graph[target] (default: the whole graph)."""
    found: List[BitSet] = []
    if target is None:
        target = graph.vertices()
    enumerate_matchings(graph, target, BitSet.empty(graph.capacity), found.append)
    return found
