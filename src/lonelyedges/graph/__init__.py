from .model import Edge, Graph, build_graph, graph_from_g6

__all__ = ["Edge", "Graph", "build_graph", "graph_from_g6"]
