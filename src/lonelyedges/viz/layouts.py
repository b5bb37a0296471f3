from __future__ import annotations

import networkx as nx


def base_layout(G: nx.Graph, seed: int = 7):
    """
    Choose a reasonable base layout:
      - planar_layout if planar
      - otherwise spring_layout
    """
    is_planar, _ = nx.check_planarity(G)
    if is_planar and G.number_of_nodes() > 2:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def layout_child_from_parent(
    parent_pos: dict,
    child: nx.Graph,
    v: int,
    seed: int = 7,
    iterations: int = 100,
    spread: float = 0.08,
):
    """
    Lay out a triangle blow-up of a parent graph, keeping old vertices near
    their parent positions and placing the two new vertices around v.

    The new vertices are the two largest labels of `child`.
    """
    n = len(parent_pos)
    init = {u: parent_pos[u] for u in parent_pos}
    x, y = parent_pos[v]
    init[n] = (x + spread, y + spread)
    init[n + 1] = (x - spread, y + spread)
    return nx.spring_layout(child, seed=seed, pos=init, iterations=iterations)
