from __future__ import annotations

from typing import List, Sequence
import networkx as nx

from lonelyedges.errors import InvalidGraphInput


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def graph6_vertex_count(g6: str) -> int:
    """
    Read n from the graph6 size prefix without decoding the body.

    One byte n+63 for n <= 62; byte 126 and three 6-bit groups for
    n <= 258047; two bytes 126 and six groups beyond that.
    """
    s = strip_graph6_header(g6)
    data = [ord(c) - 63 for c in s]
    if not data or any(not 0 <= d <= 63 for d in data):
        raise InvalidGraphInput(f"invalid graph6 string {s!r}")
    if data[0] < 63:
        return data[0]
    if len(data) > 1 and data[1] < 63:
        groups = data[1:4]
    else:
        groups = data[2:8]
        if len(groups) < 6:
            raise InvalidGraphInput(f"truncated graph6 size prefix in {s!r}")
    if len(groups) < 3:
        raise InvalidGraphInput(f"truncated graph6 size prefix in {s!r}")
    n = 0
    for d in groups:
        n = (n << 6) | d
    return n


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph on 0..n-1.

    Raises InvalidGraphInput for empty strings, characters outside the
    printable graph6 range 63..126, or a body of the wrong length.
    """
    s = strip_graph6_header(g6)
    if not s:
        raise InvalidGraphInput("empty graph6 string")
    if any(not 63 <= ord(c) <= 126 for c in s):
        raise InvalidGraphInput(f"invalid graph6 character in {s!r}")
    try:
        G = nx.from_graph6_bytes(s.encode("ascii"))
    except (ValueError, IndexError, nx.NetworkXError) as exc:
        raise InvalidGraphInput(f"cannot decode graph6 string {s!r}: {exc}") from exc
    # graph6 is simple by design, but guard anyway
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def g6_to_adjlist(g6: str) -> List[List[int]]:
    """
    Parse a graph6 string into a 0..n-1 adjacency list.

    Returns:
      adj[u] = sorted list of neighbors of u
    """
    G = g6_to_nx(g6)
    n = G.number_of_nodes()
    adj = [[] for _ in range(n)]
    for u in range(n):
        adj[u] = sorted(G.neighbors(u))
    return adj


def adjlist_to_nx(adj: Sequence[Sequence[int]]) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(range(len(adj)))
    for u, neigh in enumerate(adj):
        for v in neigh:
            if v > u:
                G.add_edge(u, v)
    return G


def adjlist_to_g6(adj: Sequence[Sequence[int]]) -> str:
    """
    Encode a 0..n-1 adjacency list as a graph6 string (no header, no newline).

    Vertex labels are kept as-is, so decoding returns the same labeling.
    """
    G = adjlist_to_nx(adj)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
