"""
Lonely-edge counts of a few small named cubic graphs.
"""

import networkx as nx

from lonelyedges.graph.model import build_graph
from lonelyedges.io.graph6 import adjlist_to_g6
from lonelyedges.matching.lonely import classify


GRAPHS = {
    "K4": nx.complete_graph(4),
    "prism": nx.circular_ladder_graph(3),
    "K3,3": nx.complete_bipartite_graph(3, 3),
    "cube": nx.cubical_graph(),
    "Petersen": nx.petersen_graph(),
    "Moebius-Kantor": nx.moebius_kantor_graph(),
    "Heawood": nx.heawood_graph(),
    "dodecahedron": nx.dodecahedral_graph(),
}


if __name__ == "__main__":
    for name, G in GRAPHS.items():
        G = nx.convert_node_labels_to_integers(G)
        adj = [sorted(G.neighbors(u)) for u in range(G.number_of_nodes())]
        g = build_graph(adj)
        res = classify(g)
        print(f"{name:16s} {adjlist_to_g6(adj):20s} matchings={res.matchings:6d}  lonely={res.count}")
