from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from lonelyedges.children.blowup import blow_up_to_triangle
from lonelyedges.graph.model import build_graph, graph_from_g6
from lonelyedges.io.graph6 import adjlist_to_nx
from lonelyedges.matching.lonely import classify
from .layouts import base_layout, layout_child_from_parent


LONELY_COLOR = "tab:red"
PLAIN_COLOR = "0.6"
TRIANGLE_COLOR = "tab:blue"


def _edge_colors(G: nx.Graph, highlight: set, color: str) -> list:
    return [color if tuple(sorted(e)) in highlight else PLAIN_COLOR for e in G.edges()]


def draw_lonely_edges(
    g6: str,
    *,
    seed: int = 7,
    node_size: int = 200,
    edge_width: float = 1.6,
    ax=None,
    save_path: str | None = None,
):
    """
    Draw a graph with its lonely edges highlighted.

    Returns the list of lonely edges (u, v), u < v.
    If save_path is set, the figure is written there instead of shown.
    """
    graph = graph_from_g6(g6)
    lonely = set(graph.edge_pairs(classify(graph).edges))
    G = adjlist_to_nx(graph.adjlist())

    fig = None
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    ax.set_axis_off()
    ax.set_title(f"{g6}   lonely edges: {len(lonely)}")

    nx.draw_networkx(
        G,
        pos=base_layout(G, seed=seed),
        ax=ax,
        node_size=node_size,
        width=edge_width,
        edge_color=_edge_colors(G, lonely, LONELY_COLOR),
    )

    if fig is not None:
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path, dpi=200)
            plt.close(fig)
        else:
            plt.show()

    return sorted(lonely)


def draw_blow_up(
    g6: str,
    v: int,
    *,
    seed: int = 7,
    node_size: int = 200,
    edge_width: float = 1.6,
    save_path: str | None = None,
):
    """
    Draw side-by-side a cubic graph and its triangle blow-up at v, with
    lonely edges in red and the new triangle in blue.

    Returns (parent lonely count, child lonely count).
    """
    parent = graph_from_g6(g6)
    child_adj = blow_up_to_triangle(parent, v)
    child = build_graph(child_adj)

    res_parent = classify(parent)
    res_child = classify(child)

    GP = adjlist_to_nx(parent.adjlist())
    GC = adjlist_to_nx(child_adj)
    pos_parent = base_layout(GP, seed=seed)
    pos_child = layout_child_from_parent(pos_parent, GC, v, seed=seed)

    n = parent.n
    triangle = {(v, n), (v, n + 1), (n, n + 1)}
    lonely_child = set(child.edge_pairs(res_child.edges))
    child_colors = [
        LONELY_COLOR if tuple(sorted(e)) in lonely_child
        else TRIANGLE_COLOR if tuple(sorted(e)) in triangle
        else PLAIN_COLOR
        for e in GC.edges()
    ]

    fig, (axP, axC) = plt.subplots(1, 2, figsize=(12, 6))
    axP.set_title(f"parent   |V|={parent.n}  lonely={res_parent.count}")
    axC.set_title(f"blow-up at {v}   |V|={child.n}  lonely={res_child.count}")
    for ax in (axP, axC):
        ax.set_axis_off()

    nx.draw_networkx(
        GP,
        pos=pos_parent,
        ax=axP,
        node_size=node_size,
        width=edge_width,
        edge_color=_edge_colors(GP, set(parent.edge_pairs(res_parent.edges)), LONELY_COLOR),
    )
    nx.draw_networkx(
        GC,
        pos=pos_child,
        ax=axC,
        node_size=node_size,
        width=edge_width,
        edge_color=child_colors,
    )

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return res_parent.count, res_child.count
